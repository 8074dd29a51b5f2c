import pytest
from src.domain.models.geo import GeoPoint, great_circle_distance_m


def test_geo_point_accepts_valid_coordinates() -> None:
    p = GeoPoint(lat=43.587795, lon=39.716901)
    assert p.lat == 43.587795
    assert p.lon == 39.716901


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_rejects_out_of_range_coordinates(lat: float, lon: float) -> None:
    with pytest.raises(ValueError):
        GeoPoint(lat=lat, lon=lon)


def test_great_circle_distance_is_zero_for_same_point() -> None:
    p = GeoPoint(lat=55.611087, lon=37.20829)
    assert great_circle_distance_m(p, p) == 0.0


def test_great_circle_distance_one_degree_of_longitude_at_equator() -> None:
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=0.0, lon=1.0)

    # 2 * pi * R / 360
    assert great_circle_distance_m(a, b) == pytest.approx(111194.93, rel=1e-6)
    assert great_circle_distance_m(b, a) == pytest.approx(great_circle_distance_m(a, b))
