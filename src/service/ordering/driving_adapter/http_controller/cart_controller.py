from typing import Any, List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ordering.app.command.update_cart_use_case import UpdateCartUseCase
from src.service.ordering.app.query.get_cart_use_case import GetCartUseCase
from src.service.ordering.driving_adapter.schema.cart_schema import (
    AddCartItemRequest,
    CartResponse,
    MenuItemResponse,
)


router = APIRouter()


@router.get('/menu', response_model=List[MenuItemResponse])
async def list_menu(
    use_case: GetCartUseCase = Depends(GetCartUseCase.depends),
) -> list[dict[str, Any]]:
    return [item.to_dict() for item in use_case.menu()]


@router.get('', response_model=CartResponse)
async def get_cart(
    use_case: GetCartUseCase = Depends(GetCartUseCase.depends),
) -> dict[str, Any]:
    return use_case.execute()


@router.post('/items', response_model=CartResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_cart_item(
    request: AddCartItemRequest,
    use_case: UpdateCartUseCase = Depends(UpdateCartUseCase.depends),
) -> dict[str, Any]:
    return use_case.add_item(item_id=request.item_id, quantity=request.quantity)


@router.delete('/items/{item_id}', response_model=CartResponse)
@Logger.io
async def remove_cart_item(
    item_id: str,
    use_case: UpdateCartUseCase = Depends(UpdateCartUseCase.depends),
) -> dict[str, Any]:
    return use_case.remove_item(item_id=item_id)


@router.delete('', response_model=CartResponse)
@Logger.io
async def clear_cart(
    use_case: UpdateCartUseCase = Depends(UpdateCartUseCase.depends),
) -> dict[str, Any]:
    return use_case.clear()
