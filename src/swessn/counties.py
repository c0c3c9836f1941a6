"""
Birth county (län) encoded in the serial of a personnummer.

Until 1990 the first digits of the serial told where a person was born.
Codes follow ISO 3166-2:SE where one exists.
See https://sv.wikipedia.org/wiki/Personnummer_i_Sverige#Födelsenumret
"""

from enum import Enum


class County(str, Enum):
    """Swedish counties as encoded in pre-1990 serial numbers."""

    A = "A"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"
    P = "P"
    R = "R"
    S = "S"
    Q = "Q"
    T = "T"
    U = "U"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    AC = "AC"
    BD = "BD"
    QQ = "QQ"
    UNKNOWN = ""

    @property
    def label(self) -> str:
        """Swedish name of the county."""
        return COUNTY_NAMES[self]


COUNTY_NAMES = {
    County.A: "Stockholms län",
    County.C: "Uppsala län",
    County.D: "Södermanlands län",
    County.E: "Östergötlands län",
    County.F: "Jönköpings län",
    County.G: "Kronobergs län",
    County.H: "Kalmar län",
    County.I: "Gotlands län",
    County.K: "Blekinge län",
    County.L: "Kristianstads län",
    County.M: "Malmöhus län",
    County.N: "Hallands län",
    County.O: "Göteborgs och Bohus län",
    County.P: "Älvsborgs län",
    County.R: "Skaraborgs län",
    County.S: "Värmlands län",
    County.Q: "Födda utomlands",
    County.T: "Örebro län",
    County.U: "Västmanlands län",
    County.W: "Kopparbergs län",
    County.X: "Gävleborgs län",
    County.Y: "Västernorrlands län",
    County.Z: "Jämtlands län",
    County.AC: "Västerbottens län",
    County.BD: "Norrbottens län",
    County.QQ: "Outside Sweden or non Swedish citizen",
    County.UNKNOWN: "Okänt",
}

# (exclusive upper bound on serial, county), ascending
COUNTY_SERIAL_BANDS = [
    (139, County.A),
    (159, County.C),
    (189, County.D),
    (239, County.E),
    (269, County.F),
    (289, County.G),
    (319, County.H),
    (329, County.I),
    (349, County.K),
    (389, County.L),
    (459, County.M),
    (479, County.N),
    (549, County.O),
    (589, County.P),
    (619, County.R),
    (649, County.S),
    (659, County.Q),
    (689, County.T),
    (709, County.U),
    (739, County.W),
    (779, County.X),
    (819, County.Y),
    (849, County.Z),
    (889, County.AC),
    (929, County.BD),
    (999, County.QQ),
]

# Serials were no longer tied to a county after this year
COUNTY_CUTOFF_YEAR = 1990


def county_from_serial(serial: int) -> County:
    """
    Look up the birth county for a serial number.

    Only meaningful for people born in or before 1990. Serial 999 lies past
    the last band and maps to County.UNKNOWN.
    """
    for upper, county in COUNTY_SERIAL_BANDS:
        if serial < upper:
            return county
    return County.UNKNOWN
