"""Generic storage engine descriptor."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from core.constants import SUPPORT_MESSAGES
from core.engines.models import EnginePage, EngineVariable, VariableStatus
from core.exceptions import UnknownInfoPageError
from core.log import get_logger
from core.types import SupportLevel, VariableKind
from core.utils import format_byte_down, format_number, to_str

if TYPE_CHECKING:
    from core.engines.registry import StorageEngineRegistry

logger = get_logger(__name__)


class StorageEngine:
    """Descriptor of one storage engine on the connected server.

    Subclasses describe engines with known variables or information pages.
    An engine the server does not list keeps ``NOT_SUPPORTED``.
    """

    def __init__(self, engine_id: str, registry: "StorageEngineRegistry") -> None:
        """Initialize the descriptor from the server's engine list.

        Args:
            engine_id: Engine name as requested by the caller
            registry: Registry providing the engine list and metadata source
        """
        self.registry = registry
        self.source = registry.source
        self.engine_id = engine_id
        self.title = engine_id
        self.comment = ""
        self.support = SupportLevel.NOT_SUPPORTED

        details = registry.find_engine(engine_id)
        if not details:
            logger.debug(f"Engine {engine_id} is not listed by the server")
            return

        self.title = to_str(details.get("Engine"), engine_id) or engine_id
        self.comment = to_str(details.get("Comment"), "") or ""
        self.support = SupportLevel.from_server(to_str(details.get("Support")))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.engine_id!r}, support={self.support.name})"

    def get_variables(self) -> dict[str, EngineVariable]:
        """Server variables with known titles, descriptions and kinds."""
        return {}

    def get_variables_like_pattern(self) -> str:
        """SQL LIKE pattern selecting this engine's variables."""
        return ""

    def get_info_pages(self) -> dict[str, str]:
        """Available information pages, page id -> label."""
        return {}

    def _page_builders(self) -> dict[str, Callable[[], EnginePage]]:
        return {}

    def get_page(self, page_id: str) -> EnginePage:
        """Build one of the pages listed by ``get_info_pages()``.

        Raises:
            UnknownInfoPageError: If the engine has no such page
        """
        pages = self.get_info_pages()
        builder = self._page_builders().get(page_id)
        if page_id not in pages or builder is None:
            raise UnknownInfoPageError(
                f"{self.title} has no information page {page_id!r}"
            )
        return builder()

    def get_mysql_help_page(self) -> str:
        """Anchor of the MySQL manual page about this engine."""
        return f"{self.engine_id}-storage-engine"

    def resolve_type_size(self, value: Any) -> tuple[str, str] | None:
        """Format a SIZE variable as (number, unit)."""
        return format_byte_down(value)

    def format_value(self, value: str, kind: VariableKind) -> str:
        if kind == VariableKind.SIZE:
            size = self.resolve_type_size(value)
            return "" if size is None else f"{size[0]} {size[1]}"
        if kind == VariableKind.NUMERIC:
            return format_number(value)
        return value

    def get_variables_report(self) -> list[VariableStatus]:
        """Current values of the engine's server variables.

        Known variables carry their metadata. Without a LIKE pattern, other
        variables are kept only when their name starts with the engine id.
        """
        known = self.get_variables()
        like = self.get_variables_like_pattern()

        report: dict[str, VariableStatus] = {}
        for row in self.source.get_global_variables(like or None):
            name = to_str(row.get("name"), "") or ""
            definition = known.get(name)
            if definition is None:
                if not like and not name.lower().startswith(self.engine_id.lower()):
                    continue
                definition = EngineVariable()

            value = to_str(row.get("value"), "") or ""
            report[name] = VariableStatus(
                name=name,
                title=definition.title or name,
                value=value,
                kind=definition.kind,
                description=definition.description,
                formatted=self.format_value(value, definition.kind),
            )
        return list(report.values())

    def get_support_message(self) -> str:
        """Sentence describing whether the server supports this engine."""
        return SUPPORT_MESSAGES[int(self.support)].format(title=self.title)
