from typing import List, Optional

from catalogue.datatypes.product import Product, ProductStock
from catalogue.exceptions import ProductNotFound
from catalogue.filters.lists import ProductFilterList
from catalogue.filters.pagination import PaginationFilter
from catalogue.services.authorization import VIEW_INACTIVE_PRODUCT
from catalogue.services.base import VisibilityScopedService


class ProductService(VisibilityScopedService):
    def product(self, id: str) -> Product:
        """
        Hidden products are NotFound for everyone; inactive ones need VIEW_INACTIVE_PRODUCT.
        """
        return self._get_visible(id, Product, ProductNotFound, VIEW_INACTIVE_PRODUCT)

    def products(
        self,
        filter: ProductFilterList,
        pagination: Optional[PaginationFilter] = None,
    ) -> List[Product]:
        filter = self._scope_filter(filter, VIEW_INACTIVE_PRODUCT)
        return self._repository.get_by_filter(filter, Product, pagination)

    def stock(self, product_id: str) -> ProductStock:
        return self._get_visible(product_id, ProductStock, ProductNotFound, VIEW_INACTIVE_PRODUCT)
