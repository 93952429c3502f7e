from typing import List, Optional

from catalogue.datatypes.manufacturer import Manufacturer
from catalogue.exceptions import ManufacturerNotFound
from catalogue.filters.lists import ManufacturerFilterList
from catalogue.filters.pagination import PaginationFilter
from catalogue.services.authorization import VIEW_INACTIVE_MANUFACTURER
from catalogue.services.base import VisibilityScopedService


class ManufacturerService(VisibilityScopedService):
    def manufacturer(self, id: str) -> Manufacturer:
        return self._get_visible(id, Manufacturer, ManufacturerNotFound, VIEW_INACTIVE_MANUFACTURER)

    def manufacturers(
        self,
        filter: ManufacturerFilterList,
        pagination: Optional[PaginationFilter] = None,
    ) -> List[Manufacturer]:
        filter = self._scope_filter(filter, VIEW_INACTIVE_MANUFACTURER)
        return self._repository.get_by_filter(filter, Manufacturer, pagination)
