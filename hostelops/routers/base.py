from typing import Dict, List, Type
from abc import ABC, abstractmethod
from fastapi import APIRouter

from ..schemas.common import (
    SuccessResponse,
    ResponseFactory,
    ConfigResponse,
    ConfigOption,
)


class BaseRouterV2(ABC):
    """Abstract base class for class-built routers"""

    def __init__(self, prefix: str, tags: List[str]):
        self.router = APIRouter(prefix=prefix, tags=tags)
        self._register_endpoints()

    @abstractmethod
    def _register_endpoints(self):
        """Register all endpoints for this router"""
        pass


class ConfigRouter(BaseRouterV2):
    """Router for configuration endpoints using enums"""

    def __init__(self, entity_name: str, prefix: str = None):
        self.entity_name = entity_name
        self.entity_name_lower = entity_name.lower()

        super().__init__(
            prefix=prefix or f"/{self.entity_name_lower}",
            tags=[f"{self.entity_name_lower}-config"],
        )

    def _register_endpoints(self):
        """Register config endpoints - will be customized per entity"""
        pass

    def add_enum_endpoint(
        self,
        enum_class: Type,
        endpoint_name: str,
        category_name: str,
        description_map: Dict[str, str] = None,
    ):
        """Add a configuration endpoint for an enum"""

        @self.router.get(
            f"/{endpoint_name}",
            response_model=SuccessResponse[ConfigResponse],
            summary=f"Get {category_name}",
            description=f"Get available {category_name.lower()} options",
        )
        async def get_enum_config():
            options = []
            for enum_value in enum_class:
                description = None
                if description_map:
                    description = description_map.get(enum_value.value)

                # Enum values are already display names
                options.append(
                    ConfigOption(
                        value=enum_value.value,
                        label=enum_value.value,
                        description=description,
                    )
                )

            return ResponseFactory.success(
                data=ConfigResponse(
                    options=options, total_count=len(options), category=category_name
                )
            )

        return get_enum_config
