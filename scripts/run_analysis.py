# path: scripts/run_analysis.py
import json
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beamcee.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

from beamcee.domain.labels import analysis_document, beam_from_dict
from beamcee.engine.analysis import perform_calculations
from beamcee.services.validation import ensure_valid


def main(argv):
    if len(argv) != 2:
        print("uso: python scripts/run_analysis.py parametros.json")
        return 2

    with open(argv[1], encoding="utf-8") as fh:
        beam = ensure_valid(beam_from_dict(json.load(fh)))

    res = perform_calculations(beam)
    logger.info("Análisis terminado: %d puntos, %d nota(s)", len(res.deflection_points), len(res.notes))
    print(json.dumps(analysis_document(beam, res), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
