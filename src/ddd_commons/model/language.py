"""Language value object."""

from enum import Enum

from ..core.exceptions import ValidationError


class Language(str, Enum):
    """Languages identified by their upper-case ISO 639-1 code."""
    AR = "AR"
    BG = "BG"
    CS = "CS"
    DA = "DA"
    DE = "DE"
    EL = "EL"
    EN = "EN"
    ES = "ES"
    ET = "ET"
    FA = "FA"
    FI = "FI"
    FR = "FR"
    HE = "HE"
    HI = "HI"
    HR = "HR"
    HU = "HU"
    HY = "HY"
    ID = "ID"
    IT = "IT"
    JA = "JA"
    KA = "KA"
    KK = "KK"
    KO = "KO"
    LT = "LT"
    LV = "LV"
    NL = "NL"
    NO = "NO"
    PL = "PL"
    PT = "PT"
    RO = "RO"
    RU = "RU"
    SK = "SK"
    SL = "SL"
    SR = "SR"
    SV = "SV"
    TH = "TH"
    TR = "TR"
    UK = "UK"
    UZ = "UZ"
    VI = "VI"
    ZH = "ZH"

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Get a language by its ISO 639-1 code in any case.

        Raises:
            ValidationError: If the code is not a known language
        """
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise ValidationError(f"Invalid language code: {code!r}.", property_name="language")

    @property
    def code(self) -> str:
        """Lower-case ISO 639-1 code."""
        return self.value.lower()
