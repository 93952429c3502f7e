from typing import List, Optional

from catalogue.datatypes.category import Category
from catalogue.exceptions import CategoryNotFound, Unauthorized
from catalogue.filters.lists import CategoryFilterList
from catalogue.filters.pagination import PaginationFilter
from catalogue.filters.primitives import IDFilter
from catalogue.services.authorization import VIEW_INACTIVE_CATEGORY
from catalogue.services.base import VisibilityScopedService


class CategoryService(VisibilityScopedService):
    def category(self, id: str) -> Category:
        """
        Raises:
            CategoryNotFound: If the id does not resolve to a visible row
            Unauthorized: If the category is inactive and VIEW_INACTIVE_CATEGORY is not granted
        """
        return self._get_visible(id, Category, CategoryNotFound, VIEW_INACTIVE_CATEGORY)

    def categories(
        self,
        filter: CategoryFilterList,
        pagination: Optional[PaginationFilter] = None,
    ) -> List[Category]:
        filter = self._scope_filter(filter, VIEW_INACTIVE_CATEGORY)
        return self._repository.get_by_filter(filter, Category, pagination)

    def parent(self, category: Category) -> Optional[Category]:
        """
        Parent category, or None when there is none the caller may see.

        Like the other relations, a missing parent and an inactive parent the
        caller lacks VIEW_INACTIVE_CATEGORY for both yield None.
        """
        if not category.parent_id:
            return None
        try:
            return self.category(category.parent_id)
        except (CategoryNotFound, Unauthorized):
            return None

    def children(self, category: Category) -> List[Category]:
        return self.categories(CategoryFilterList(parent_id=IDFilter(equals=category.id)))
