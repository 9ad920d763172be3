"""
Configuration management for scaffolding.

Handles loading the project configuration file and merging it over the
built-in defaults, with validation of the naming case and advisory checks
of the file-name patterns.
"""

import copy
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Any, List, Mapping, Optional, Tuple, Union

from ..logging_config import get_logger
from ..utils import JSONLoaderError, dump_json_file, load_json_file
from .naming import CASE_VARIABLES, NamingCase
from .schema import TEMPLATE_VARIABLES
from .templates import find_placeholders

logger = get_logger(__name__)

CONFIG_FILE_NAME = "hexforge.config.json"

DEFAULT_BASE_PATH = "src"
DEFAULT_FILE_NAME_CASE = NamingCase.PASCAL_CASE

DEFAULT_FILE_PATTERNS: Dict[str, Dict[str, str]] = {
    "handler": {
        "handlerFile": "{{dashName}}.handler.ts",
        "schemaFile": "{{pascalName}}Schema.ts",
        "dtoFile": "{{dashName}}.dto.ts",
    },
    "domain": {
        "modelFile": "{{pascalName}}.ts",
        "serviceFile": "{{pascalName}}Service.ts",
        "portFile": "{{pascalName}}{{adapterType}}Port.ts",
        "adapterFile": "{{pascalName}}{{adapterType}}Adapter.ts",
    },
    "service": {
        "serviceFile": "{{pascalName}}Service.ts",
    },
    "port": {
        "portFile": "{{pascalName}}Port.ts",
        "adapterFile": "{{pascalName}}Adapter.ts",
    },
    "adapter": {
        "adapterFile": "{{pascalName}}{{adapterType}}Adapter.ts",
    },
}

DEFAULT_DIRECTORIES: Dict[str, Dict[str, str]] = {
    "handler": {
        "base": "handlers",
        "schema": "handlers/schemas",
    },
    "domain": {
        "base": "{{domainName}}",
        "model": "{{domainName}}/models",
        "service": "{{domainName}}/services",
        "port": "{{domainName}}/ports",
    },
    "adapter": {
        "base": "infra/{{adapterType}}",
    },
    "service": {
        "base": "{{domainName}}/services",
    },
    "port": {
        "base": "{{domainName}}/ports",
    },
}

# Variables that carry the component name in some case
NAME_VARIABLES = ("name",) + tuple(CASE_VARIABLES.values())


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class ScaffoldConfig:
    """Resolved configuration for one generation run."""

    base_path: str = DEFAULT_BASE_PATH
    file_name_case: NamingCase = DEFAULT_FILE_NAME_CASE
    directories: Dict[str, Dict[str, str]] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_DIRECTORIES)
    )
    file_patterns: Dict[str, Dict[str, str]] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_FILE_PATTERNS)
    )

    # Where the user overlay came from, and what was discarded while merging it
    source: Optional[Path] = None
    warnings: Tuple[str, ...] = ()

    def directory_template(self, component: str, role: str) -> Optional[str]:
        """Return the configured directory pattern, or None if absent."""
        return self.directories.get(component, {}).get(role)

    def file_pattern(self, component: str, role: str) -> Optional[str]:
        """Return the configured file-name pattern, or None if absent."""
        return self.file_patterns.get(component, {}).get(role)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the configuration file's key names."""
        return {
            "basePath": self.base_path,
            "fileNameCase": self.file_name_case.value,
            "directories": copy.deepcopy(self.directories),
            "filePatterns": copy.deepcopy(self.file_patterns),
        }


def merge_config(base: ScaffoldConfig, overlay: Mapping[str, Any]) -> ScaffoldConfig:
    """
    Merge a partial configuration over ``base``.

    Only ``directories`` and ``filePatterns`` are merged recursively, one
    level per component type and one per role. ``basePath`` and
    ``fileNameCase`` are replaced wholesale when the overlay value is
    valid; invalid values are discarded with a warning.

    Args:
        base: Configuration to start from
        overlay: Partial configuration using the file's key names

    Returns:
        New merged configuration
    """
    warnings = list(base.warnings)

    base_path = base.base_path
    if "basePath" in overlay:
        value = overlay["basePath"]
        if isinstance(value, str):
            base_path = value
        else:
            warnings.append(
                f"Ignoring basePath {value!r}: expected a string, keeping '{base.base_path}'"
            )

    file_name_case = base.file_name_case
    if "fileNameCase" in overlay:
        value = overlay["fileNameCase"]
        parsed = NamingCase.parse(value)
        if parsed is None:
            warnings.append(
                f"Invalid fileNameCase {value!r}, keeping '{base.file_name_case.value}'. "
                f"Valid values are: {', '.join(NamingCase.values())}"
            )
        else:
            file_name_case = parsed

    directories = _merge_template_maps(
        base.directories, overlay.get("directories"), "directories", warnings
    )
    file_patterns = _merge_template_maps(
        base.file_patterns, overlay.get("filePatterns"), "filePatterns", warnings
    )

    known_keys = {"basePath", "fileNameCase", "directories", "filePatterns"}
    for key in overlay:
        if key not in known_keys:
            warnings.append(f"Unknown configuration key '{key}' ignored")

    for warning in warnings[len(base.warnings):]:
        logger.debug(warning)

    return replace(
        base,
        base_path=base_path,
        file_name_case=file_name_case,
        directories=directories,
        file_patterns=file_patterns,
        warnings=tuple(warnings),
    )


def _merge_template_maps(
    base: Dict[str, Dict[str, str]],
    overlay: Any,
    key: str,
    warnings: List[str],
) -> Dict[str, Dict[str, str]]:
    """Merge component -> role -> template maps, overlay winning per role."""
    merged = {component: dict(roles) for component, roles in base.items()}

    if overlay is None:
        return merged

    if not isinstance(overlay, dict):
        warnings.append(f"Ignoring '{key}': expected an object")
        return merged

    for component, roles in overlay.items():
        if not isinstance(roles, dict):
            warnings.append(f"Ignoring '{key}.{component}': expected an object")
            continue

        target = merged.setdefault(component, {})
        for role, template in roles.items():
            if isinstance(template, str):
                target[role] = template
            else:
                warnings.append(
                    f"Ignoring '{key}.{component}.{role}': expected a string"
                )

    return merged


class ConfigManager:
    """Manages configuration loading, merging and validation."""

    def __init__(self, defaults: Optional[ScaffoldConfig] = None):
        """
        Initialize configuration manager.

        Args:
            defaults: Configuration used as the merge base
        """
        self.defaults = defaults or ScaffoldConfig()

    def config_path(self, base_path: Union[str, Path] = ".") -> Path:
        """Return where the configuration file is expected."""
        return Path(base_path) / CONFIG_FILE_NAME

    def get_config(
        self,
        base_path: Union[str, Path] = ".",
        custom_config: Optional[Dict[str, Any]] = None,
    ) -> ScaffoldConfig:
        """
        Get the effective configuration.

        Args:
            base_path: Directory holding the configuration file
            custom_config: Overrides applied after the file

        Returns:
            Defaults, merged with the file if one is present, merged with
            ``custom_config`` if given
        """
        config = self.defaults
        path = self.config_path(base_path)

        user_config = self.read_user_config(path)
        if user_config is None:
            if path.exists():
                config = replace(
                    config,
                    warnings=config.warnings
                    + (f"Could not use {path}, falling back to default configuration",),
                )
        else:
            logger.info("Using configuration from %s", path)
            config = merge_config(replace(config, source=path), user_config)

        if custom_config:
            config = merge_config(config, custom_config)

        return config

    def read_user_config(self, path: Path) -> Optional[Dict[str, Any]]:
        """
        Read the raw user configuration.

        Returns:
            The parsed object, or None when the file is absent, unreadable
            or does not contain a JSON object
        """
        if not path.exists():
            logger.debug("No configuration file at %s, using defaults", path)
            return None

        try:
            data = load_json_file(path)
        except (JSONLoaderError, FileNotFoundError) as e:
            logger.warning("Error loading configuration file, using defaults: %s", e)
            return None

        if not isinstance(data, dict):
            logger.warning(
                "Configuration file must contain a JSON object, using defaults: %s", path
            )
            return None

        return data

    def validate_config(self, config: ScaffoldConfig) -> List[str]:
        """
        Check the configuration for self-inconsistencies.

        Reports file-name patterns whose name placeholder does not match
        ``fileNameCase``, and placeholders no generator ever supplies
        (those always resolve to an empty string). Advisory only.

        Returns:
            List of warning messages
        """
        warnings = []
        expected = CASE_VARIABLES[config.file_name_case]

        for component, patterns in config.file_patterns.items():
            for role, pattern in patterns.items():
                case_variables = [
                    v for v in find_placeholders(pattern) if v in CASE_VARIABLES.values()
                ]
                if case_variables and expected not in case_variables:
                    used = ", ".join(f"{{{{{v}}}}}" for v in case_variables)
                    warnings.append(
                        f"filePatterns.{component}.{role}: '{pattern}' uses {used} "
                        f"but fileNameCase '{config.file_name_case.value}' "
                        f"expects {{{{{expected}}}}}"
                    )

        for key, templates in (
            ("directories", config.directories),
            ("filePatterns", config.file_patterns),
        ):
            for component, roles in templates.items():
                for role, template in roles.items():
                    for variable in find_placeholders(template):
                        if variable not in TEMPLATE_VARIABLES:
                            warnings.append(
                                f"{key}.{component}.{role}: unknown placeholder "
                                f"{{{{{variable}}}}} resolves to an empty string"
                            )

        return warnings

    def fix_case_variables(
        self, user_config: Dict[str, Any], file_name_case: NamingCase
    ) -> Tuple[Dict[str, Any], List[str]]:
        """
        Rewrite name placeholders in user file patterns to match a case.

        Args:
            user_config: Raw user configuration (not modified)
            file_name_case: Case whose variable should be used

        Returns:
            Tuple of (fixed configuration, descriptions of the changes)
        """
        fixed = copy.deepcopy(user_config)
        changes = []
        expected = CASE_VARIABLES[file_name_case]

        patterns = fixed.get("filePatterns")
        if not isinstance(patterns, dict):
            return fixed, changes

        for component, roles in patterns.items():
            if not isinstance(roles, dict):
                continue
            for role, pattern in roles.items():
                if not isinstance(pattern, str):
                    continue
                new_pattern = pattern
                for variable in CASE_VARIABLES.values():
                    if variable != expected:
                        new_pattern = new_pattern.replace(
                            f"{{{{{variable}}}}}", f"{{{{{expected}}}}}"
                        )
                if new_pattern != pattern:
                    roles[role] = new_pattern
                    changes.append(
                        f"filePatterns.{component}.{role}: '{pattern}' -> '{new_pattern}'"
                    )

        return fixed, changes

    def save_config(
        self,
        config: Union[ScaffoldConfig, Dict[str, Any]],
        output_path: Union[str, Path],
        backup: bool = False,
    ) -> Optional[Path]:
        """
        Save configuration to a JSON file.

        Args:
            config: Resolved configuration or raw configuration object
            output_path: Destination file
            backup: Copy an existing file to ``<name>.bak`` first

        Returns:
            Path of the backup, if one was made
        """
        path = Path(output_path)
        config_dict = config.to_dict() if isinstance(config, ScaffoldConfig) else config

        backup_path = None
        try:
            if backup and path.exists():
                backup_path = path.with_name(path.name + ".bak")
                shutil.copyfile(path, backup_path)
            dump_json_file(config_dict, path)
        except (OSError, JSONLoaderError) as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

        return backup_path


def load_config(
    base_path: Union[str, Path] = ".",
    custom_config: Optional[Dict[str, Any]] = None,
) -> ScaffoldConfig:
    """
    Load the configuration for one command.

    Always reads the file again; nothing is cached between calls.

    Args:
        base_path: Directory holding the configuration file
        custom_config: Overrides applied after the file

    Returns:
        Merged configuration
    """
    return ConfigManager().get_config(base_path, custom_config)
