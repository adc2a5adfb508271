"""
Dialect registry for managing available target languages.

Provides registration and instantiation of language dialects.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.dialect import LanguageDialect
from .core.exceptions import GeneratorError

logger = get_logger(__name__)


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class DialectRegistry:
    """Registry for managing available language dialects."""

    def __init__(self):
        """Initialize empty registry."""
        self._dialects: Dict[str, Type[LanguageDialect]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        dialect_class: Type[LanguageDialect],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a dialect for a language.

        Args:
            language: Primary language name (e.g., 'java')
            dialect_class: Class implementing LanguageDialect
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If dialect class is invalid or an alias conflicts
        """
        if not (
            isinstance(dialect_class, type) and issubclass(dialect_class, LanguageDialect)
        ):
            raise RegistryError("Dialect class must inherit from LanguageDialect")

        language_key = language.lower()

        if language_key in self._dialects and not replace:
            logger.debug("Dialect %s already registered; skipping", language_key)
            return

        self._dialects[language_key] = dialect_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._dialects:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def get_dialect_class(self, language: str) -> Type[LanguageDialect]:
        """
        Get dialect class for language.

        Args:
            language: Language name or alias

        Returns:
            Dialect class

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()

        if language_key in self._dialects:
            return self._dialects[language_key]

        if language_key in self._aliases:
            return self._dialects[self._aliases[language_key]]

        raise RegistryError(
            f"No dialect registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_dialect(
        self,
        language: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> LanguageDialect:
        """
        Create dialect instance for language.

        Args:
            language: Language name
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured dialect instance

        Raises:
            RegistryError: If dialect creation fails
        """
        dialect_class = self.get_dialect_class(language)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(language, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(language, custom_config=config)
        elif config is None:
            final_config = load_config(language)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return dialect_class(final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._dialects.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(a for a, target in self._aliases.items() if target == language_key)

    def is_supported(self, language: str) -> bool:
        language_key = language.lower()
        return language_key in self._dialects or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        dialect_class = self.get_dialect_class(language)
        language_key = self._aliases.get(language.lower(), language.lower())
        dialect = dialect_class(load_config(language_key))

        return {
            "name": dialect.language_name,
            "class": dialect_class.__name__,
            "file_extension": dialect.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "module": dialect_class.__module__,
        }


# Global registry instance - created once
_global_registry: Optional[DialectRegistry] = None


def get_registry() -> DialectRegistry:
    """Get the global dialect registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = DialectRegistry()
        _auto_register_dialects(_global_registry)
    return _global_registry


def _auto_register_dialects(registry: DialectRegistry):
    """Register the bundled dialects."""
    from .languages.java import JavaDialect

    registry.register("java", JavaDialect, aliases=["jvm"])


def get_dialect(
    language: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> LanguageDialect:
    """Get dialect instance from the global registry."""
    return get_registry().create_dialect(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from the global registry."""
    return get_registry().list_languages()


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def is_language_supported(language: str) -> bool:
    """Check if a language or alias is registered."""
    return get_registry().is_supported(language)
