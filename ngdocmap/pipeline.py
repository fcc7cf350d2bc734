"""Pipeline orchestration: load comments, map them and render the result."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import MapperConfig, load_config
from .loader import LoadError, load_comments
from .logging import get_logger
from .mapper import NgdocMapper
from .models import Module
from .render import render, write_output


@dataclass
class PipelineResult:
    """Outcome of a mapping run."""

    modules: List[Module]
    output: str
    path: Optional[Path] = None


class Pipeline:
    """Coordinates the load -> map -> render flow for the CLI and service."""

    def __init__(self, mapper: NgdocMapper | None = None) -> None:
        self.mapper = mapper or NgdocMapper()
        self.logger = get_logger("pipeline")

    def run(
        self,
        input_path: str | Path | None = None,
        output_path: str | Path | None = None,
        *,
        fmt: str | None = None,
        config_path: str | Path | None = None,
    ) -> PipelineResult:
        """Map the comment dump at ``input_path``.

        Arguments override the configuration file. When no output path is
        known the rendered text is only returned.
        """
        config = self._load_config(config_path)
        source = Path(input_path).expanduser() if input_path is not None else config.input
        if source is None:
            raise LoadError("No input file given and none configured")
        target = Path(output_path).expanduser() if output_path is not None else config.output
        effective_format = fmt or config.format

        self.logger.info("Loading comments from %s", source)
        comments = load_comments(source)
        self.logger.debug("Loaded %d comments", len(comments))

        modules = self.mapper.map(comments)
        self._log_summary(modules)

        if target is None:
            text = render(modules, effective_format, indent=config.indent)
        else:
            text = write_output(modules, target, effective_format, indent=config.indent)
            self.logger.info("Wrote %s output to %s", effective_format, target)
        return PipelineResult(modules=modules, output=text, path=target)

    def _load_config(self, config_path: str | Path | None) -> MapperConfig:
        path = Path(config_path) if config_path is not None else Path.cwd()
        config = load_config(path)
        self.logger.debug("Using configuration rooted at %s", config.root)
        return config

    def _log_summary(self, modules: List[Module]) -> None:
        entities = [entity for module in modules for entity in module.entities]
        methods = sum(len(entity.methods) for entity in entities)
        self.logger.info(
            "Mapped %d modules, %d entities, %d methods",
            len(modules),
            len(entities),
            methods,
        )


__all__ = ["Pipeline", "PipelineResult"]
