"""Enumerations for fedtax."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"
    MFS = "MARRIED_FILING_SEPARATELY"
    HOH = "HEAD_OF_HOUSEHOLD"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_joint(self) -> bool:
        return self is FilingStatus.MFJ

    @classmethod
    def parse(cls, raw: "str | FilingStatus") -> "FilingStatus":
        """Resolve a short key, enum value or web-form key to a FilingStatus.

        Raises ValueError for anything unrecognized.
        """
        if isinstance(raw, FilingStatus):
            return raw
        key = str(raw).strip()
        if key in _ALIASES:
            return _ALIASES[key]
        upper = key.upper()
        if upper in cls.__members__:
            return cls[upper]
        return cls(upper)


_LABELS: dict[FilingStatus, str] = {
    FilingStatus.SINGLE: "Single",
    FilingStatus.MFJ: "Married Filing Jointly",
    FilingStatus.MFS: "Married Filing Separately",
    FilingStatus.HOH: "Head of Household",
}

# Keys used by the calculator's web form
_ALIASES: dict[str, FilingStatus] = {
    "single": FilingStatus.SINGLE,
    "marriedJoint": FilingStatus.MFJ,
    "marriedSeparate": FilingStatus.MFS,
    "headOfHousehold": FilingStatus.HOH,
}
