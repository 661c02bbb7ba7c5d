from dataclasses import dataclass

import pandas as pd

import accrete.util.misc as misc


@dataclass
class DustBand:
    """
    Interval [inner_edge, outer_edge) of the cloud with independent dust and
    gas availability
    """

    inner_edge: float
    outer_edge: float
    dust_present: bool = True
    gas_present: bool = True

    def overlaps(self, inner, outer):
        return self.outer_edge > inner and self.inner_edge < outer

    def flags(self):
        return (self.dust_present, self.gas_present)


class DustCloud:
    """
    The protoplanetary dust and gas cloud around the star. Tracks which
    orbital distance intervals still hold dust and gas as an ordered list of
    non-overlapping bands.

    Args:
        stellar_mass (float):
            Mass of the star in solar masses
        dust_density_coeff (float):
            Dust density scale, A in Dole's paper
    """

    def __init__(self, stellar_mass, dust_density_coeff):
        self.stellar_mass = stellar_mass
        self.dust_density_coeff = dust_density_coeff
        self.inner_edge = misc.inner_dust_limit(stellar_mass)
        self.outer_edge = misc.outer_dust_limit(stellar_mass)
        self.bands = [DustBand(self.inner_edge, self.outer_edge, True, True)]

    def __repr__(self):
        return f"{type(self).__name__} object\n{self.get_band_df()}"

    def get_band_df(self):
        return pd.DataFrame(
            {
                "inner_edge": [band.inner_edge for band in self.bands],
                "outer_edge": [band.outer_edge for band in self.bands],
                "dust_present": [band.dust_present for band in self.bands],
                "gas_present": [band.gas_present for band in self.bands],
            }
        )

    def dust_available(self, inner=None, outer=None):
        """
        Whether any band overlapping [inner, outer) still has dust, defaults
        to the whole cloud
        """
        if inner is None:
            inner = self.inner_edge
        if outer is None:
            outer = self.outer_edge
        return any(
            band.dust_present and band.overlaps(inner, outer) for band in self.bands
        )

    def dust_extent(self):
        """
        Innermost and outermost edge of the bands that still have dust, None
        when the cloud has been swept clean
        """
        dusty = [band for band in self.bands if band.dust_present]
        if not dusty:
            return None
        return dusty[0].inner_edge, dusty[-1].outer_edge

    def band_at(self, r):
        for band in self.bands:
            if band.inner_edge <= r < band.outer_edge:
                return band
        return None

    def profile(self, r):
        """
        Dust density of the undisturbed cloud at a distance r from the star.
        Growth evaluates it at the nucleus orbit and counts only the bands
        that still hold dust, as Dole does.
        """
        return misc.dust_density(self.dust_density_coeff, self.stellar_mass, r)

    def density_at(self, r):
        """
        Local dust density at a distance r from the star, zero where the dust
        has already been swept up
        """
        band = self.band_at(r)
        if band is None or not band.dust_present:
            return 0.0
        return self.profile(r)

    def sweep(self, inner, outer, sweep_gas=False):
        """
        Remove the dust, and the gas when sweep_gas is set, between inner and
        outer. Bands straddling either edge are split so only the covered part
        is cleared, the sweep is clipped to the cloud.
        """
        inner = max(inner, self.inner_edge)
        outer = min(outer, self.outer_edge)
        if outer <= inner:
            return

        new_bands = []
        for band in self.bands:
            if not band.overlaps(inner, outer):
                new_bands.append(band)
                continue
            if band.inner_edge < inner:
                new_bands.append(
                    DustBand(band.inner_edge, inner, band.dust_present, band.gas_present)
                )
            new_bands.append(
                DustBand(
                    max(band.inner_edge, inner),
                    min(band.outer_edge, outer),
                    False,
                    band.gas_present and not sweep_gas,
                )
            )
            if band.outer_edge > outer:
                new_bands.append(
                    DustBand(outer, band.outer_edge, band.dust_present, band.gas_present)
                )
        self.bands = new_bands
        self.compress()

    def compress(self):
        """
        Merge neighbouring bands with the same dust and gas flags
        """
        merged = [self.bands[0]]
        for band in self.bands[1:]:
            if band.flags() == merged[-1].flags():
                merged[-1] = DustBand(
                    merged[-1].inner_edge,
                    band.outer_edge,
                    band.dust_present,
                    band.gas_present,
                )
            else:
                merged.append(band)
        self.bands = merged
