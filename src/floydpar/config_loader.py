import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from floydpar.algorithms.floyd_warshall import DEFAULT_MAX_WORKERS


class ConfigLoadError(Exception):
    """Custom exception for config loading errors."""
    pass


@dataclass
class RunConfig:
    """Parámetros de una corrida de la consola."""
    size: Optional[int] = None
    max_workers: int = DEFAULT_MAX_WORKERS
    seed: Optional[int] = None
    snapshot: bool = True
    report_dir: Optional[str] = None
    show_matrices: bool = True

    def merged(self, **overrides: Any) -> "RunConfig":
        """Copy with every non-None override applied (command line wins)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


# clave -> tipos aceptados (None permitido donde el default es None)
_EXPECTED_TYPES: Dict[str, tuple] = {
    "size": (int, type(None)),
    "max_workers": (int,),
    "seed": (int, type(None)),
    "snapshot": (bool,),
    "report_dir": (str, type(None)),
    "show_matrices": (bool,),
}


class ConfigLoader:
    """Handles loading and validating the JSON run configuration."""

    def __init__(self, file_path: str):
        self.file_path = Path(file_path)
        self.data: Optional[Dict[str, Any]] = None

    def load(self) -> RunConfig:
        """Load and validate the JSON structure."""
        if not self.file_path.exists():
            raise ConfigLoadError(f"Archivo no encontrado: {self.file_path}")

        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                self.data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"JSON inválido: {e}")

        if not isinstance(self.data, dict):
            raise ConfigLoadError("La configuración debe ser un objeto JSON")

        known = {f.name for f in fields(RunConfig)}
        unknown = set(self.data) - known
        if unknown:
            raise ConfigLoadError(f"Claves desconocidas: {sorted(unknown)}")

        for key, value in self.data.items():
            expected = _EXPECTED_TYPES[key]
            # bool es subclase de int: no aceptarlo donde se espera un entero
            if isinstance(value, bool) and bool not in expected:
                raise ConfigLoadError(f"'{key}' debe ser {expected[0].__name__}, no bool")
            if not isinstance(value, expected):
                raise ConfigLoadError(f"'{key}' debe ser {expected[0].__name__}, no {type(value).__name__}")

        if self.data.get("size") is not None and self.data["size"] < 0:
            raise ConfigLoadError("'size' debe ser >= 0")
        if self.data.get("max_workers", DEFAULT_MAX_WORKERS) < 1:
            raise ConfigLoadError("'max_workers' debe ser >= 1")

        return RunConfig(**self.data)
