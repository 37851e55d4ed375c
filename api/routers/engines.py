"""Storage engine router."""

from fastapi import APIRouter, Depends

from api.dependencies import get_request_context
from api.models.engines import EngineListResponse
from api.utils.error_handler import handle_api_operation
from core.context import RequestContext
from core.engines import EngineDetails, EnginePage
from core.services import EngineService

router = APIRouter(prefix="/v1/engines", tags=["engines"])


@router.get("", response_model=EngineListResponse)
def list_engines(
    context: RequestContext = Depends(get_request_context),
) -> EngineListResponse:
    """List the engines that can be picked for a table."""
    engines = EngineService().list_engines(context.engines)
    return EngineListResponse(engines=engines, count=len(engines))


@router.get("/{engine}", response_model=EngineDetails)
def get_engine(
    engine: str,
    context: RequestContext = Depends(get_request_context),
) -> EngineDetails:
    """Describe an engine with its support level and variables.

    Engines the server does not list are reported as not supported.
    """
    return EngineService().get_engine_details(context.engines, engine)


@router.get("/{engine}/pages/{page}", response_model=EnginePage)
def get_engine_page(
    engine: str,
    page: str,
    context: RequestContext = Depends(get_request_context),
) -> EnginePage:
    """Build one of the engine's information pages.

    Raises:
        HTTPException: If the engine has no such page
    """
    return handle_api_operation(
        lambda: EngineService().get_engine_page(context.engines, engine, page)
    )
