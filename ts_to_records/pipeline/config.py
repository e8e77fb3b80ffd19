"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import MissingConfigurationError

DEFAULT_KOTLIN_IMPORTS = [
    "expo.modules.kotlin.records.Record",
    "expo.modules.kotlin.records.Field",
    "expo.modules.kotlin.types.Enumerable",
]

DEFAULT_SWIFT_IMPORTS = ["ExpoModulesCore"]

GENERATION_COMMENT = "Generated by ts_to_records. Do not edit."


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Kotlin package for the generated file (required for Kotlin)
    kotlin_package_name: str = ""

    # Imports written at the top of generated Kotlin files
    kotlin_imports: list[str] = field(default_factory=lambda: list(DEFAULT_KOTLIN_IMPORTS))

    # Modules imported at the top of generated Swift files
    swift_imports: list[str] = field(default_factory=lambda: list(DEFAULT_SWIFT_IMPORTS))

    # Add generation comment at top of file
    add_generation_comment: bool = False

    def require_kotlin_package_name(self) -> str:
        if not self.kotlin_package_name:
            raise MissingConfigurationError("kotlin.packageName")
        return self.kotlin_package_name

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary.

        Accepts flat keys as well as the per-target layout used by config
        files, e.g. {"kotlin": {"packageName": "expo.modules.foo"}}.
        """
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "kotlin" and isinstance(v, dict):
                if "packageName" in v:
                    config.kotlin_package_name = v["packageName"]
                if "imports" in v:
                    config.kotlin_imports = list(v["imports"])
            elif k == "swift" and isinstance(v, dict):
                if "imports" in v:
                    config.swift_imports = list(v["imports"])
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "kotlin_package_name": self.kotlin_package_name,
            "kotlin_imports": self.kotlin_imports,
            "swift_imports": self.swift_imports,
            "add_generation_comment": self.add_generation_comment,
        }
