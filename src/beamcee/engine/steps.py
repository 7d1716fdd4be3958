from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from beamcee.domain.beam import BeamType, NormalizedBeam
from beamcee.domain.loads import PointLoad, TriangularLoad, UniformLoad
from beamcee.domain.results import CalculationStep, Reactions, ResponseSummary
from beamcee.engine.normalize import BeamLike, as_normalized, localize_load
from beamcee.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from beamcee.engine.variants import FormulaVariant, formula_variant

SS = BeamType.SIMPLY_SUPPORTED
CANT = BeamType.CANTILEVER
FIXED = BeamType.FIXED

POINT = PointLoad.kind
UNIFORM = UniformLoad.kind
TRIANGULAR = TriangularLoad.kind

EXACT = FormulaVariant.EXACT
FULL = FormulaVariant.FULL_SPAN
EQUIV = FormulaVariant.EQUIVALENT_POINT
HYBRID = FormulaVariant.HYBRID

Key = Tuple[BeamType, str, FormulaVariant]

_FIXED_END = "R₁ = Wb²(3a+b)/L³, R₂ = Wa²(a+3b)/L³, M₁ = −Wab²/L², M₂ = Wa²b/L²"

# (reacciones, diagrama de momentos, deformada)
TEMPLATES: Dict[Key, Tuple[str, str, str]] = {
    (SS, POINT, EXACT): (
        "R₁ = P × b/L, R₂ = P × a/L",
        "M(x) = R₁×x for 0≤x≤a, M(x) = R₁×x − P×(x−a) for a≤x≤L",
        "δ(x) = P×b×x×(L²−b²−x²)/(6EIL) for x≤a, mirrored with a for x>a; θ(x) = dδ/dx",
    ),
    (SS, UNIFORM, FULL): (
        "R₁ = R₂ = wL/2",
        "M(x) = (wL/2)×x − (w×x²)/2 for 0≤x≤L",
        "δ(x) = w×x×(L³−2L×x²+x³)/(24EI), δ_max = (5wL⁴)/(384EI), θ_max = (wL³)/(24EI)",
    ),
    (SS, UNIFORM, EQUIV): (
        "W = w×c, R₂ = W×x̄/L, R₁ = W − R₂",
        "M(x) = R₁×x − w×<x−x₁>²/2 + w×<x−x₂>²/2",
        "δ(x) from the point-load formula with P = W applied at x̄ (equivalent point load)",
    ),
    (SS, TRIANGULAR, HYBRID): (
        "W = w×c/2, x̄ = x₂ − c/3, R₂ = W×x̄/L, R₁ = W − R₂",
        "M(x) = R₁×x − w×<x−x₁>³/(6c) for x₁≤x≤x₂, M(x) = R₁×x − W×(x−x̄) for x≥x₂",
        "EI×δ(x) = −R₁x³/6 + w×<x−x₁>⁵/(120c) + C₁x inside the load; "
        "equivalent point load W at x̄ outside it",
    ),
    (CANT, POINT, EXACT): (
        "R = P, M = P×a",
        "M(x) = −P(a−x) for 0≤x≤a, M(x) = 0 for a≤x≤L",
        "δ(x) = P×x²×(3a−x)/(6EI) for x≤a, δ(x) = P×a²×(3x−a)/(6EI) for x>a; "
        "δ_max = (Pa²(3L−a))/(6EI), θ_max = (Pa²)/(2EI)",
    ),
    (CANT, UNIFORM, FULL): (
        "R = wL, M = wL²/2",
        "M(x) = −w(L−x)²/2 for 0≤x≤L",
        "δ(x) = w×x²×(6L²−4L×x+x²)/(24EI), δ_max = (wL⁴)/(8EI), θ_max = (wL³)/(6EI)",
    ),
    (CANT, UNIFORM, EXACT): (
        "R = w×c, M = w×c×x̄",
        "M(x) = R×x − M − w×<x−x₁>²/2 + w×<x−x₂>²/2",
        "EI×δ(x) = M×x²/2 − R×x³/6 + w×<x−x₁>⁴/24 − w×<x−x₂>⁴/24",
    ),
    (CANT, TRIANGULAR, EXACT): (
        "R = w×c/2, M = R×(x₂ − c/3)",
        "M(x) = R×x − M − w×<x−x₁>³/(6c) + w×<x−x₂>³/(6c) + w×<x−x₂>²/2",
        "EI×δ(x) = M×x²/2 − R×x³/6 + w×<x−x₁>⁵/(120c) − w×<x−x₂>⁵/(120c) − w×<x−x₂>⁴/24",
    ),
    (FIXED, POINT, EXACT): (
        "R₁ = Pb²(3a+b)/L³, R₂ = Pa²(a+3b)/L³, M₁ = −Pab²/L², M₂ = Pa²b/L²",
        "M(x) = M₁ + R₁×x − P×<x−a>",
        "EI×δ(x) = −(M₁x²/2 + R₁x³/6) + P×<x−a>³/6",
    ),
    (FIXED, UNIFORM, FULL): (
        "R₁ = R₂ = wL/2, M₁ = −wL²/12, M₂ = wL²/12",
        "M(x) = −wL²/12 + (wL/2)×x − w×x²/2",
        "δ(x) = w×x²×(L−x)²/(24EI), δ_max = (wL⁴)/(384EI)",
    ),
    (FIXED, UNIFORM, EQUIV): (
        "W = w×c at x̄ (a = x̄, b = L − x̄): " + _FIXED_END,
        "M(x) = M₁ + R₁×x − w×<x−x₁>²/2 + w×<x−x₂>²/2",
        "EI×δ(x) = −(M₁x²/2 + R₁x³/6) + W×<x−x̄>³/6 (equivalent point load, approximate)",
    ),
    (FIXED, TRIANGULAR, EQUIV): (
        "W = w×c/2 at x̄ = x₂ − c/3 (a = x̄, b = L − x̄): " + _FIXED_END,
        "M(x) = M₁ + R₁×x − w×<x−x₁>³/(6c) + w×<x−x₂>³/(6c) + w×<x−x₂>²/2",
        "EI×δ(x) = −(M₁x²/2 + R₁x³/6) + W×<x−x̄>³/6 (equivalent point load, approximate)",
    ),
}

GENERIC: Tuple[str, str, str] = (
    "R = Σ Rᵢ (superposition of the reactions of each load)",
    "M(x) = R₁×x + M_end − Σ Mqᵢ(x), Mqᵢ = moment of load i to the left of x",
    "δ(x) = Σ δᵢ(x), θ(x) = Σ θᵢ(x) (superposition of each load's closed-form solution)",
)

CONJUGATE: Dict[BeamType, str] = {
    SS: (
        "Create a conjugate beam with the same length. Simply supported beam "
        "remains simply supported in conjugate beam."
    ),
    CANT: "Create a conjugate beam where the fixed end becomes free and free end becomes fixed.",
    FIXED: (
        "Create a conjugate beam where both fixed ends become free. The M/EI "
        "loading alone keeps it in equilibrium, so slope and deflection vanish at both ends."
    ),
}

APPROXIMATION_NOTES: Dict[FormulaVariant, str] = {
    EQUIV: "The load is replaced by its resultant at its centroid (equivalent point load).",
    HYBRID: (
        "Inside the load span the exact integral of the linear intensity is used; "
        "outside it the load acts as an equivalent point load."
    ),
}


def _template_key(beam: NormalizedBeam, tol: float) -> Optional[Key]:
    """Clave de plantilla: sólo con una carga que quede en una sola pieza."""
    if len(beam.loads) != 1:
        return None
    pieces = localize_load(beam, beam.loads[0])
    if len(pieces) != 1:
        return None
    piece = pieces[0]
    kind = type(piece).kind
    return beam.beam_type, kind, formula_variant(beam.beam_type, piece, beam.span, tol)


def _reactions_text(beam_type: BeamType, R: Reactions) -> str:
    if beam_type == CANT:
        return f"R = {R.R1:.2f} N, M = {(R.M1 or 0.0):.2f} N·m"
    out = f"R₁ = {R.R1:.2f} N, R₂ = {R.R2:.2f} N"
    if beam_type == FIXED:
        out += f", M₁ = {(R.M1 or 0.0):.2f} N·m, M₂ = {(R.M2 or 0.0):.2f} N·m"
    return out


def generate_steps(
    beam: BeamLike,
    reactions: Reactions,
    deflection: ResponseSummary,
    slope: ResponseSummary,
    settings: Optional[AnalysisSettings] = None,
) -> List[CalculationStep]:
    """
    Narrativa de cálculo: reacciones -> diagrama de momentos -> viga conjugada
    -> carga M/EI -> giro y deflexión.
    deflection en mm, slope en grados (salida del muestreador).
    """
    settings = settings or DEFAULT_SETTINGS
    nb = as_normalized(beam)
    key = _template_key(nb, settings.length_tol)
    reaction_f, moment_f, deflection_f = TEMPLATES.get(key, GENERIC) if key else GENERIC

    n_loads = len(nb.loads)
    if key is None:
        reaction_desc = (
            f"Determine the reactions of each of the {n_loads} loads with the equilibrium "
            "equations and add them up."
        )
    else:
        reaction_desc = "Determine the reaction forces at the supports using equilibrium equations."

    result_desc = "Calculate the maximum slope and deflection using conjugate beam theorems."
    if key is not None and key[2] in APPROXIMATION_NOTES:
        result_desc += " " + APPROXIMATION_NOTES[key[2]]

    return [
        CalculationStep(
            title="Step 1: Calculate Reaction Forces",
            description=reaction_desc,
            formula=reaction_f,
            result=_reactions_text(nb.beam_type, reactions),
        ),
        CalculationStep(
            title="Step 2: Determine Bending Moment Diagram",
            description="Calculate the bending moment equation for the real beam.",
            formula=moment_f,
            result="Bending moment diagram created",
        ),
        CalculationStep(
            title="Step 3: Construct Conjugate Beam",
            description=CONJUGATE[nb.beam_type],
            result="Conjugate beam constructed",
        ),
        CalculationStep(
            title="Step 4: Apply M/EI as Load on Conjugate Beam",
            description="The bending moment diagram divided by EI becomes the loading on the conjugate beam.",
            formula="w_c(x) = M(x)/EI",
            result=f"Conjugate beam loaded with M/EI (EI = {nb.EI:.4e} N·m²)",
        ),
        CalculationStep(
            title="Step 5: Calculate Slope and Deflection",
            description=result_desc,
            formula=deflection_f,
            result=(
                f"Maximum deflection = {deflection.max_value:.4f} mm at x = {deflection.max_position:.2f} m, "
                f"Maximum slope = {slope.max_value:.4f}° at x = {slope.max_position:.2f} m"
            ),
        ),
    ]
