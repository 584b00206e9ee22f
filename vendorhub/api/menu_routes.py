from vendorhub.api.factory import build_scoped_router
from vendorhub.models.menu_item import MenuItem
from vendorhub.schemas.menu import MenuItemCreate, MenuItemRead, MenuItemUpdate

router = build_scoped_router(
    model=MenuItem,
    create_schema=MenuItemCreate,
    update_schema=MenuItemUpdate,
    read_schema=MenuItemRead,
    prefix="/api/menu",
    tags=["menu"],
    order_by=lambda m: m.name,
)
