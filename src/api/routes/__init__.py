"""API route modules."""

from src.api.routes.accountants import router as accountants_router
from src.api.routes.customers import router as customers_router
from src.api.routes.dashboard import router as dashboard_router
from src.api.routes.health import router as health_router
from src.api.routes.invoices import router as invoices_router
from src.api.routes.reports import router as reports_router
from src.api.routes.setup import router as setup_router

__all__ = [
    "accountants_router",
    "customers_router",
    "dashboard_router",
    "health_router",
    "invoices_router",
    "reports_router",
    "setup_router",
]
