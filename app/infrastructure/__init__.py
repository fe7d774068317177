"""Infrastructure modules for the Table Localizer application.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings, LocalizationSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation table and language switching
"""
