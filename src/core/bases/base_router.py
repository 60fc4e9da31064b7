from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel

from src.core.bases.base_service import BaseService
from src.core.response.handlers import response_handler

# Ids are unsigned 64-bit integers
MAX_ITEM_ID = 2**64 - 1

ENVELOPE_RESPONSES = {
    200: {"description": "Operation succeeded, body is the payload"},
    417: {"description": "Operation failed, body is the empty payload"},
    422: {"description": "Validation error"},
}


class BaseRouter:
    """Base router class registering CRUD endpoints on configurable paths.

    Every endpoint resolves the service through ``service_dependency``,
    invokes exactly one service call and hands the envelope to
    ``response_handler``. Endpoints are plain functions so FastAPI runs
    each request on its worker thread pool.
    """

    list_path: str = "/"
    get_path: str = "/{item_id}"
    create_path: str = "/"
    update_path: str = "/update"
    delete_path: str = "/{item_id}/delete"

    def __init__(
        self,
        service_dependency: Callable[..., BaseService],
        tags: Optional[List[str]] = None,
        prefix: str = "",
        create_schema: Optional[Type[BaseModel]] = None,
        update_schema: Optional[Type[BaseModel]] = None,
        dependencies: Optional[List[Callable]] = None,
    ):
        self.service_dependency = service_dependency
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix
        self.create_schema = create_schema
        self.update_schema = update_schema

        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags,  # type:ignore
            dependencies=[Depends(dep) for dep in dependencies or []],
        )

        self._register_routes()

    def _register_routes(self) -> None:
        """Register all CRUD routes."""
        self._register_list()
        self._register_get_by_id()
        self._register_create()
        self._register_update()
        self._register_delete()

    def _register_list(self) -> None:
        service_dependency = self.service_dependency

        @self.router.get(self.list_path, summary="List items", responses=ENVELOPE_RESPONSES)
        def list_items(service: BaseService = Depends(service_dependency)):
            return response_handler(service.get_all())

    def _register_get_by_id(self) -> None:
        service_dependency = self.service_dependency

        @self.router.get(self.get_path, summary="Get item by ID", responses=ENVELOPE_RESPONSES)
        def get_by_id(
            item_id: int = Path(..., ge=0, le=MAX_ITEM_ID),
            service: BaseService = Depends(service_dependency),
        ):
            return response_handler(service.get_by_id(item_id))

    def _register_create(self) -> None:
        if not self.create_schema:
            return
        service_dependency = self.service_dependency

        @self.router.post(self.create_path, summary="Create new item", responses=ENVELOPE_RESPONSES)
        def create_item(
            item_data: self.create_schema,  # type: ignore
            service: BaseService = Depends(service_dependency),
        ):
            return response_handler(service.create(item_data))

    def _register_update(self) -> None:
        if not self.update_schema:
            return
        service_dependency = self.service_dependency

        @self.router.post(self.update_path, summary="Update item", responses=ENVELOPE_RESPONSES)
        def update_item(
            item_data: self.update_schema,  # type: ignore
            service: BaseService = Depends(service_dependency),
        ):
            return response_handler(service.update(item_data))

    def _register_delete(self) -> None:
        service_dependency = self.service_dependency

        @self.router.post(self.delete_path, summary="Delete item", responses=ENVELOPE_RESPONSES)
        def delete_item(
            item_id: int = Path(..., ge=0, le=MAX_ITEM_ID),
            service: BaseService = Depends(service_dependency),
        ):
            return response_handler(service.delete(item_id))

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
