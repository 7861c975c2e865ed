"""Tests for star generation."""

import pytest

from worldgen.generators.stargen import (
    generate_stars,
    size_for_flux,
    spectral_for_flux,
)
from worldgen.generators.types import (
    LuminosityClass,
    SpectralClass,
    StarPosition,
)
from tests.factories import scripted_roller


class TestSpectralTable:
    @pytest.mark.parametrize(
        "flux,expected",
        [
            (-6, SpectralClass.B),
            (-5, SpectralClass.A),
            (-3, SpectralClass.F),
            (0, SpectralClass.G),
            (2, SpectralClass.K),
            (5, SpectralClass.M),
            (6, SpectralClass.BD),
        ],
    )
    def test_lookup(self, flux, expected):
        assert spectral_for_flux(flux) == expected

    def test_flux_past_table_is_pinned(self):
        assert spectral_for_flux(10) == SpectralClass.BD
        assert spectral_for_flux(-9) == SpectralClass.B


class TestSizeTable:
    @pytest.mark.parametrize(
        "flux,expected",
        [
            (-5, LuminosityClass.II),
            (-4, LuminosityClass.III),
            (-3, LuminosityClass.IV),
            (-2, LuminosityClass.V),
            (3, LuminosityClass.V),
            (4, LuminosityClass.VI),
        ],
    )
    def test_lookup(self, flux, expected):
        assert size_for_flux(flux, SpectralClass.G) == expected

    def test_m_dwarfs_are_never_giants(self):
        assert size_for_flux(-5, SpectralClass.M) == LuminosityClass.V
        assert size_for_flux(-4, SpectralClass.M) == LuminosityClass.V
        assert size_for_flux(-3, SpectralClass.M) == LuminosityClass.IV


class TestGenerateStars:
    def test_primary_with_near_companion(self):
        faces = [
            3, 3,  # primary flux 0 -> G
            3,  # decimal 1D10-1 = 2
            4, 4,  # size flux 0 -> V
            1, 1,  # close: flux 0, absent
            6, 1,  # near: flux 5, present
            4,  # companion flux 0 + 1D6-1 = 3 -> M
            6,  # decimal 5
            1, 6,  # size flux -5 -> II, M dwarf -> V
            2, 2,  # far: flux 0, absent
        ]
        dice, source = scripted_roller(faces)
        stars = generate_stars(dice)

        assert len(stars) == 2
        primary, companion = stars
        assert primary.position == StarPosition.PRIMARY
        assert (primary.spectral, primary.decimal, primary.size) == (
            SpectralClass.G,
            2,
            LuminosityClass.V,
        )
        assert companion.position == StarPosition.NEAR
        assert (companion.spectral, companion.decimal, companion.size) == (
            SpectralClass.M,
            5,
            LuminosityClass.V,
        )
        assert source.remaining == 0

    @pytest.mark.parametrize(
        "face,expected",
        [
            (1, SpectralClass.G),  # 0 + 0
            (3, SpectralClass.K),  # 0 + 2
            (4, SpectralClass.M),  # 0 + 3
        ],
    )
    def test_companion_adds_1d6_minus_1_to_primary_flux(self, face, expected):
        faces = [
            3, 3,  # primary flux 0 -> G
            3,  # decimal
            4, 4,  # size V
            6, 3,  # close: flux 3, present
            face,  # companion flux 0 + 1D6-1
            1,  # decimal
            3, 3,  # size V
            1, 1,  # near absent
            1, 1,  # far absent
        ]
        dice, source = scripted_roller(faces)
        stars = generate_stars(dice)

        assert stars[1].position == StarPosition.CLOSE
        assert stars[1].spectral == expected
        assert source.remaining == 0

    def test_brown_dwarf_companion_draws_nothing_more(self):
        faces = [
            6, 1,  # primary flux 5 -> M
            1,  # decimal 0
            3, 3,  # size V
            6, 3,  # close: flux 3, present
            6,  # companion flux 5 + 5 = 10 -> BD
            1, 1,  # near absent
            1, 1,  # far absent
        ]
        dice, source = scripted_roller(faces)
        stars = generate_stars(dice)

        assert [s.spectral for s in stars] == [SpectralClass.M, SpectralClass.BD]
        assert stars[1].position == StarPosition.CLOSE
        assert stars[1].decimal is None
        assert stars[1].size is None
        assert stars[1].is_brown_dwarf
        assert source.remaining == 0

    def test_always_has_primary(self, seeded_roller):
        for _ in range(10):
            stars = generate_stars(seeded_roller)
            assert 1 <= len(stars) <= 4
            assert stars[0].position == StarPosition.PRIMARY
            assert not stars[0].is_brown_dwarf
