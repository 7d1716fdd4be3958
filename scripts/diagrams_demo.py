from beamcee.domain.beam import BeamDescription, BeamType
from beamcee.domain.loads import PointLoad, UniformLoad
from beamcee.engine.diagrams import bending_moment_at, sample_internal_forces, shear_at

beam = BeamDescription(
    length=4.0,
    elastic_modulus=210000,
    moment_of_inertia=2.5e7,
    beam_type=BeamType.FIXED,
    loads=(
        PointLoad(magnitude=20.0, position=1.5),
        UniformLoad(magnitude=5.0, start_position=0.0, end_position=4.0),
    ),
)

diag = sample_internal_forces(beam, n=40)
print("V(0) [N] =", shear_at(beam, 0.0))
print("M(0) [N·m] =", bending_moment_at(beam, 0.0))
print("M(L/2) [N·m] =", bending_moment_at(beam, 2.0))
print("M(L) [N·m] =", bending_moment_at(beam, 4.0))
print("|M| max [kN·m] =", float(abs(diag.moment).max()))
