import math

import numpy as np
from pytest import approx

from faultoffset.ellipsoid import *


def test_radii_of_curvature():
    # At the equator N is the semi-major axis
    assert prime_vertical_radius(0.) == approx(6_378_137.0, abs=1e-6)
    assert meridional_radius(0.) == approx(6_335_439.327, abs=1e-3)

    # At the poles both radii coincide
    assert meridional_radius(90.) == approx(prime_vertical_radius(90.), abs=1e-6)


def test_km_per_degree_equator():
    lat_km = km_per_latitude_degree(0.)
    lon_km = km_per_longitude_degree(0.)
    assert lat_km == approx(111.3, abs=1.)
    assert lon_km == approx(111.3, abs=1.)

    assert lat_km == approx(110.574276, abs=1e-6)
    assert lon_km == approx(111.319491, abs=1e-6)


def test_km_per_degree_mid_latitude():
    assert km_per_latitude_degree(45.) == approx(111.131777, abs=1e-6)
    assert km_per_longitude_degree(45.) == approx(78.846835, abs=1e-6)

    # Symmetric about the equator
    assert km_per_latitude_degree(-45.) == km_per_latitude_degree(45.)
    assert km_per_longitude_degree(-45.) == approx(km_per_longitude_degree(45.), abs=1e-12)


def test_km_per_longitude_degree_decreasing():
    lats = np.linspace(0., 90., 181)
    lon_km = km_per_longitude_degree(lats)
    assert np.all(np.diff(lon_km) < 0)
    assert lon_km[-1] == approx(0., abs=1e-9)

    lon_km = km_per_longitude_degree(-lats)
    assert np.all(np.diff(lon_km) < 0)


def test_km_per_latitude_degree_non_decreasing():
    lats = np.linspace(0., 90., 181)
    assert np.all(np.diff(km_per_latitude_degree(lats)) >= 0)
    assert np.all(np.diff(km_per_latitude_degree(-lats)) >= 0)
    assert km_per_latitude_degree(90.) == approx(111.693980, abs=1e-6)


def test_local_scale():
    scale = local_scale(35.)
    assert isinstance(scale, LocalScale)
    assert scale.km_per_lat_degree == km_per_latitude_degree(35.)
    assert scale.km_per_lon_degree == km_per_longitude_degree(35.)


def test_nan_propagates():
    assert math.isnan(km_per_latitude_degree(float('nan')))
    assert math.isnan(km_per_longitude_degree(float('nan')))
