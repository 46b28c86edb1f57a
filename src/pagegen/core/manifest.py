import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .parser import PAGEMODEL_EXTENSION

MANIFEST_NAME = "pagegen.toml"


@dataclass
class GeneratorConfig:
    """Where page models are read from and where Java is written."""

    src_dir: str = "src/main/resources/pagemodels"
    gen_root_dir: str = "src/gen/java"
    extension: str = PAGEMODEL_EXTENSION
    imports: list[str] = field(default_factory=list)  # added to every generated file


@dataclass
class ProjectManifest:
    """
    Project configuration from pagegen.toml.

    Example pagegen.toml:

        [project]
        name = "myapp-pagemodels"

        [generator]
        src_dir = "src/main/resources/pagemodels"
        gen_root_dir = "src/gen/java"
        imports = ["import com.example.tools.*;"]
    """

    name: str | None = None
    root: Path = field(default_factory=Path.cwd)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @property
    def src_path(self) -> Path:
        return (self.root / self.generator.src_dir).resolve()

    @property
    def gen_root_path(self) -> Path:
        return (self.root / self.generator.gen_root_dir).resolve()


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load pagegen.toml.

    A missing file yields the defaults, rooted at the file's directory.

    Raises:
        ConfigError: If the file is not valid TOML or has wrongly typed values
    """
    root = path.parent.resolve()
    if not path.exists():
        return ProjectManifest(root=root)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid manifest {path}: {e}") from e

    project = data.get("project", {})
    generator_data = data.get("generator", {})
    for section, value in (("project", project), ("generator", generator_data)):
        if not isinstance(value, dict):
            raise ConfigError(f"Invalid manifest {path}: [{section}] must be a table")
    defaults = GeneratorConfig()

    imports = generator_data.get("imports", [])
    if not isinstance(imports, list) or not all(isinstance(i, str) for i in imports):
        raise ConfigError(f"Invalid manifest {path}: generator.imports must be a list of strings")

    generator = GeneratorConfig(
        src_dir=str(generator_data.get("src_dir", defaults.src_dir)),
        gen_root_dir=str(generator_data.get("gen_root_dir", defaults.gen_root_dir)),
        extension=str(generator_data.get("extension", defaults.extension)),
        imports=[i if i.endswith(";") else i + ";" for i in imports],
    )
    return ProjectManifest(name=project.get("name"), root=root, generator=generator)
