"""Table index router."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_request_context
from api.models.indexes import (
    DuplicateIndexesResponse,
    IndexResponse,
    TableIndexesResponse,
)
from api.utils.error_handler import handle_api_operation
from core.context import RequestContext
from core.services import IndexService

router = APIRouter(
    prefix="/v1/databases/{database}/tables/{table}/indexes", tags=["indexes"]
)


@router.get("", response_model=TableIndexesResponse)
def get_table_indexes(
    database: str,
    table: str,
    kinds: list[str] | None = Query(
        default=None, description="Index kinds to include (PRIMARY, UNIQUE, ...)"
    ),
    context: RequestContext = Depends(get_request_context),
) -> TableIndexesResponse:
    """List the indexes of a table.

    Args:
        database: Schema name
        table: Table name
        kinds: Optional kind filter; all kinds when omitted

    Raises:
        HTTPException: If a kind name is unknown
    """

    def get_indexes_operation() -> TableIndexesResponse:
        index_service = IndexService()
        mask = index_service.parse_kinds(kinds)
        indexes = index_service.list_indexes(context.indexes, database, table, mask)
        return TableIndexesResponse(
            database=database,
            table=table,
            indexes=[IndexResponse.from_index(index) for index in indexes],
            count=len(indexes),
        )

    return handle_api_operation(get_indexes_operation)


@router.get("/duplicates", response_model=DuplicateIndexesResponse)
def get_duplicate_indexes(
    database: str,
    table: str,
    context: RequestContext = Depends(get_request_context),
) -> DuplicateIndexesResponse:
    """Report indexes of a table that have identical structure."""
    notices = IndexService().get_duplicate_notices(context.indexes, database, table)
    return DuplicateIndexesResponse(
        database=database,
        table=table,
        duplicates=notices,
        count=len(notices),
    )
