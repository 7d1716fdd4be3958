from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisSettings:
    # subdivisiones de [0, L] para curvas y extremos (n+1 puntos)
    n_samples: int = 100
    # tolerancia para "carga en todo el tramo" y coincidencias de posición [m]
    length_tol: float = 1e-9

    def validate(self) -> None:
        if self.n_samples <= 0:
            raise ValueError("n_samples debe ser positivo")
        if self.length_tol <= 0.0:
            raise ValueError("length_tol debe ser positivo")


DEFAULT_SETTINGS = AnalysisSettings()
