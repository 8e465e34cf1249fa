"""Application service: Get Total Price use case."""

from __future__ import annotations

import logging

from catalog.application.dto import PriceQuoteDTO
from catalog.application.mapping import to_dto
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing_service import PricingService

logger = logging.getLogger(__name__)


class GetTotalPriceHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._pricing = PricingService(product_repo)

    def handle(self, product_ids: list[int]) -> PriceQuoteDTO:
        products, total = self._pricing.total_price(product_ids)
        logger.debug("Priced %d entries at %.2f", len(product_ids), total)
        return PriceQuoteDTO(
            products=[to_dto(p) for p in products],
            total_price=total,
        )
