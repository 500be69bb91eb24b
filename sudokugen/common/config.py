# -*- coding: utf-8 -*-
"""Configs for the puzzle generator and its HTTP service."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from omegaconf import OmegaConf

from sudokugen.common.constants import (
    DEFAULT_BLANK_COUNT,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_PLACEHOLDER,
    DEFAULT_PORT,
    DEFAULT_SIZE,
    OutputFormat,
)
from sudokugen.common.grid import box_size_of
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_SIZE  # must be a perfect square
    seed: Optional[int] = None  # None draws a fresh seed per run


@dataclass
class DisplayConfig:
    """Configuration for rendering a generated grid"""

    blank_count: int = DEFAULT_BLANK_COUNT  # cells hidden behind the placeholder
    placeholder: str = DEFAULT_PLACEHOLDER
    output_format: OutputFormat = OutputFormat.JSON


@dataclass
class ServiceConfig:
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    port: int = DEFAULT_PORT
    # largest size a request may ask for; searches grow steeply with size
    max_size: int = DEFAULT_SIZE


@dataclass
class LogConfig:
    level: Optional[str] = None  # if None, use the SUDOKUGEN_LOG_LEVEL env var


@dataclass
class Config:
    """Global Configuration"""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def check_and_update(self) -> Config:
        """Validate the config and fill derived values."""
        try:
            box_size_of(self.generator.size)
            box_size_of(self.service.max_size)
        except ValueError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        if self.generator.size > self.service.max_size:
            logger.warning(
                f"generator.size ({self.generator.size}) exceeds service.max_size "
                f"({self.service.max_size}), raising service.max_size."
            )
            self.service.max_size = self.generator.size

        total = self.generator.size * self.generator.size
        if not 0 <= self.display.blank_count <= total:
            raise ValueError(
                f"Invalid configuration: display.blank_count must be within 0..{total}, "
                f"got {self.display.blank_count}"
            )
        if not self.display.placeholder or self.display.placeholder.isdigit():
            raise ValueError(
                "Invalid configuration: display.placeholder must be a non-digit string, "
                f"got {self.display.placeholder!r}"
            )
        if not 0 < self.service.port < 65536:
            raise ValueError(f"Invalid configuration: service.port out of range: {self.service.port}")
        return self


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(Config)
    yaml_config = OmegaConf.load(config_path)
    try:
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
