from beamcee.domain.beam import BeamDescription, BeamType
from beamcee.domain.loads import PointLoad, UniformLoad, TriangularLoad
from beamcee.engine.analysis import perform_calculations


beam = BeamDescription(
    length=6.0,
    elastic_modulus=200000,      # MPa
    moment_of_inertia=8.0e7,     # mm4
    beam_type=BeamType.SIMPLY_SUPPORTED,
    loads=(
        PointLoad(magnitude=12.0, position=2.0),                              # kN
        UniformLoad(magnitude=3.0, start_position=0.0, end_position=6.0),     # kN/m
        TriangularLoad(magnitude=4.0, start_position=3.0, end_position=6.0),  # kN/m en x=6
    ),
)

res = perform_calculations(beam)
print("R1 [N] =", res.reactions.R1)
print("R2 [N] =", res.reactions.R2)
print("δ centro [mm] =", res.deflection.midspan)
print("δ max [mm] =", res.deflection.max_value, "en x =", res.deflection.max_position)
print("θ izq [°] =", res.slope.left_end)
for step in res.steps:
    print(f"\n{step.title}\n  {step.formula or ''}\n  {step.result or ''}")
print("\n".join(res.notes))
