"""
Page model generation driver.

Discovers page model files under a source directory, compiles each one to
Java and writes it below the output root at ``<package path>/<Name>.java``.

Files are compiled independently. A file that fails to parse or write is
logged and recorded in the report; the remaining files are still generated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pagegen.codegen.java_writer import JavaWriter
from pagegen.core.errors import ConfigError
from pagegen.core.fileset import discover_pagemodel_files
from pagegen.core.ir import ModelTree
from pagegen.core.manifest import ProjectManifest
from pagegen.core.parser import PAGEMODEL_EXTENSION, model_name_for, parse_pagemodel

logger = logging.getLogger(__name__)

JAVA_EXTENSION = ".java"


@dataclass
class GenerationFailure:
    """A page model file that could not be generated."""

    path: Path
    error: Exception

    @property
    def message(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


@dataclass
class GenerationReport:
    """Outcome of a generation run."""

    generated: list[Path] = field(default_factory=list)
    failures: list[GenerationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def compile_pagemodel(text: str, name: str, extra_imports: Sequence[str] = ()) -> str:
    """
    Compile page model source to Java source.

    Args:
        text: Page model source
        name: Class name of the root model
        extra_imports: Import statements added to the generated file

    Returns:
        Java source
    """
    tree = parse_pagemodel(text, name)
    return JavaWriter(extra_imports).generate(tree)


def output_path_for(tree: ModelTree, source: Path, out_dir: Path, extension: str) -> Path:
    """Output path: ``<out_dir>/<package as dirs>/<source name><.java>``."""
    package_dir = out_dir.joinpath(*tree.root.package.split("."))
    return package_dir / (model_name_for(source, extension) + JAVA_EXTENSION)


def generate_page_model(
    source: Path,
    out_dir: Path,
    extension: str = PAGEMODEL_EXTENSION,
    writer: JavaWriter | None = None,
) -> Path:
    """
    Generate the Java file for one page model.

    Args:
        source: Page model file
        out_dir: Output root directory
        extension: Page model file extension
        writer: Writer to render with (default: a plain JavaWriter)

    Returns:
        Path to the generated file
    """
    writer = writer if writer is not None else JavaWriter()
    text = source.read_text(encoding="utf-8")
    tree = parse_pagemodel(text, model_name_for(source, extension), source)
    content = writer.generate(tree)

    output_path = output_path_for(tree, source, out_dir, extension)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path


def generate_page_models(
    src_dir: Path,
    out_dir: Path,
    extension: str = PAGEMODEL_EXTENSION,
    extra_imports: Sequence[str] = (),
) -> GenerationReport:
    """
    Generate Java for every page model under ``src_dir``.

    Args:
        src_dir: Directory searched recursively for page models
        out_dir: Output root directory
        extension: Page model file extension
        extra_imports: Import statements added to every generated file

    Returns:
        GenerationReport listing generated files and per-file failures

    Raises:
        ConfigError: If ``src_dir`` does not exist
    """
    if not src_dir.is_dir():
        raise ConfigError(f"Page model directory does not exist [{src_dir}]")

    writer = JavaWriter(extra_imports)
    report = GenerationReport()
    for source in discover_pagemodel_files(src_dir, extension):
        logger.info("Generating: %s", source)
        try:
            report.generated.append(generate_page_model(source, out_dir, extension, writer))
        except Exception as e:
            logger.error("Failed to generate %s: %s", source, e)
            report.failures.append(GenerationFailure(path=source, error=e))
    return report


def generate_from_manifest(manifest: ProjectManifest) -> GenerationReport:
    """Run generation with the directories and imports from a project manifest."""
    config = manifest.generator
    return generate_page_models(
        manifest.src_path,
        manifest.gen_root_path,
        extension=config.extension,
        extra_imports=config.imports,
    )
