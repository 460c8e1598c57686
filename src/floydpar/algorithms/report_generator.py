# algorithms/report_generator.py
import json
import os
from datetime import datetime
from typing import Optional

from floydpar.algorithms.floyd_warshall.compare import ComparisonReport
from floydpar.algorithms.solver import ApspResult


class ReportGenerator:
    """
    Genera el reporte final de una corrida en formato JSON.
    El archivo se almacena en una carpeta especificada por el usuario.

    Estructura del JSON resultante:
      {
        "start_time": "...",
        "graph": {"size": ..., "infinities": ..., "seed": ...},
        "max_workers": ...,
        "snapshot": ...,
        "engines": [{"name": ..., "status": ..., "elapsed_seconds": ...}, ...],
        "comparison": {"length_differences": ..., "path_differences": ...},
        "end_reason": "..."
      }
    """

    def __init__(self, output_dir: str):
        # Crear carpeta para los reportes si no existe
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

        self.data = {
            "start_time": datetime.now().isoformat(),
            "graph": {"size": None, "infinities": None, "seed": None},
            "max_workers": None,
            "snapshot": None,
            "engines": [],
            "comparison": None,
            "end_reason": None,   # "finished", "negative_cycle", ...
        }

    def log_graph(self, size: int, infinities: int, seed: Optional[int] = None,
                  max_workers: Optional[int] = None, snapshot: Optional[bool] = None):
        self.data["graph"] = {"size": int(size), "infinities": int(infinities), "seed": seed}
        self.data["max_workers"] = max_workers
        self.data["snapshot"] = snapshot

    def log_engine(self, result: ApspResult):
        """Registra el estado y el tiempo de un motor."""
        self.data["engines"].append({
            "name": result.strategy.value,
            "status": result.status.value,
            "elapsed_seconds": float(result.elapsed),
            "detail": result.detail,
        })

    def log_comparison(self, comparison: ComparisonReport):
        self.data["comparison"] = {
            "length_differences": int(comparison.length_differences),
            "path_differences": int(comparison.path_differences),
        }

    def finalize(self, end_reason: str = "finished") -> str:
        """
        Cierra el reporte y lo guarda a disco.
        Devuelve la ruta completa del archivo JSON generado.
        """
        self.data["end_reason"] = end_reason

        filename = f"report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        filepath = os.path.join(self.output_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4, ensure_ascii=False)

        return filepath
