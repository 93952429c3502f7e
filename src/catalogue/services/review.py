from typing import List, Optional

from catalogue.datatypes.product import Product
from catalogue.datatypes.review import Review, Reviewer
from catalogue.exceptions import NotFound, ReviewNotFound, Unauthorized
from catalogue.filters.lists import ReviewFilterList
from catalogue.filters.pagination import PaginationFilter
from catalogue.services.authorization import VIEW_INACTIVE_REVIEW, Authorization
from catalogue.services.base import VisibilityScopedService
from catalogue.services.product import ProductService
from catalogue.services.repository import Repository
from catalogue.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewService(VisibilityScopedService):
    def __init__(self, repository: Repository, authorization: Authorization, product_service: ProductService):
        super().__init__(repository, authorization)
        self._product_service = product_service

    def review(self, id: str) -> Review:
        return self._get_visible(id, Review, ReviewNotFound, VIEW_INACTIVE_REVIEW)

    def reviews(
        self,
        filter: ReviewFilterList,
        pagination: Optional[PaginationFilter] = None,
    ) -> List[Review]:
        filter = self._scope_filter(filter, VIEW_INACTIVE_REVIEW)
        return self._repository.get_by_filter(filter, Review, pagination)

    def reviewer(self, review: Review) -> Optional[Reviewer]:
        """User who wrote the review, None if the user row is gone."""
        try:
            return self._repository.get_by_id(review.user_id, Reviewer)
        except NotFound:
            logger.debug(f"Review {review.id} references missing user {review.user_id}")
            return None

    def product(self, review: Review) -> Optional[Product]:
        """Reviewed product, None if the review is not about a product or the product is not visible."""
        if not review.is_about_product():
            return None
        try:
            return self._product_service.product(review.object_id)
        except (NotFound, Unauthorized):
            logger.debug(f"Review {review.id} product {review.object_id} is not visible")
            return None
