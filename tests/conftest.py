import pytest

# <dV/dlambda> at 11 equally spaced lambda windows
LAMBDA_POINTS = [
    (0.0, 51.49866347),
    (0.1, 23.92508775),
    (0.2, 10.35390700),
    (0.3, 2.58426990),
    (0.4, -2.18351656),
    (0.5, -5.41745387),
    (0.6, -7.62452181),
    (0.7, -9.25455804),
    (0.8, -10.45592989),
    (0.9, -11.39244138),
    (1.0, -12.12433704),
]


@pytest.fixture
def lambda_points():
    return list(LAMBDA_POINTS)


@pytest.fixture
def lambda_file(tmp_path, lambda_points):
    path = tmp_path / "dvdl.dat"
    path.write_text("".join(f"{x}, {y}\n" for x, y in lambda_points))
    return path
