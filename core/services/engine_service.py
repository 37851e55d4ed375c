"""Service for storage engine operations."""

from core.engines import EngineDetails, EnginePage, EngineSummary, StorageEngineRegistry


class EngineService:
    """Service for storage engine lookups."""

    def list_engines(self, registry: StorageEngineRegistry) -> list[EngineSummary]:
        """Engines that can be picked for a table."""
        return registry.to_display_list()

    def get_engine_details(
        self,
        registry: StorageEngineRegistry,
        engine_id: str,
    ) -> EngineDetails:
        """Describe an engine; unknown engines are reported as not supported."""
        engine = registry.resolve(engine_id)
        return EngineDetails(
            engine_id=engine.engine_id,
            title=engine.title,
            comment=engine.comment,
            support=engine.support,
            support_message=engine.get_support_message(),
            help_page=engine.get_mysql_help_page(),
            info_pages=engine.get_info_pages(),
            variables=engine.get_variables_report(),
        )

    def get_engine_page(
        self,
        registry: StorageEngineRegistry,
        engine_id: str,
        page_id: str,
    ) -> EnginePage:
        """Build an engine information page.

        Raises:
            UnknownInfoPageError: If the engine has no such page
        """
        return registry.resolve(engine_id).get_page(page_id)
