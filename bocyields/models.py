from typing import List
from pydantic import BaseModel, ConfigDict, Field

# -----------------------------
# Typed records for the Valet "bond_yields_all" group payload.
# Field names are pythonic; aliases are the JSON keys the API uses.
# -----------------------------
class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GroupDetail(_Record):
    label: str = ""
    description: str = ""
    link: str = ""


class Terms(_Record):
    url: str = ""


class Dimension(_Record):
    key: str = ""
    name: str = ""


class Detail(_Record):
    label: str = ""
    description: str = ""
    dimension: Dimension = Field(default_factory=Dimension)


class Val(_Record):
    # Published as text, e.g. "2.57"; kept as-is
    v: str = ""


# attribute name -> Valet series key
SERIES_KEYS = {
    "average_1_to_3_year":  "CDN.AVG.1YTO3Y.AVG",
    "average_3_to_5_year":  "CDN.AVG.3YTO5Y.AVG",
    "average_5_to_10_year": "CDN.AVG.5YTO10Y.AVG",
    "average_over_10_year": "CDN.AVG.OVER.10.AVG",
    "yield_2_year":         "BD.CDN.2YR.DQ.YLD",
    "yield_3_year":         "BD.CDN.3YR.DQ.YLD",
    "yield_5_year":         "BD.CDN.5YR.DQ.YLD",
    "yield_7_year":         "BD.CDN.7YR.DQ.YLD",
    "yield_10_year":        "BD.CDN.10YR.DQ.YLD",
    "yield_long":           "BD.CDN.LONG.DQ.YLD",
    "yield_rrb":            "BD.CDN.RRB.DQ.YLD",
}


class SeriesDetail(_Record):
    average_1_to_3_year:  Detail = Field(default_factory=Detail, alias="CDN.AVG.1YTO3Y.AVG")
    average_3_to_5_year:  Detail = Field(default_factory=Detail, alias="CDN.AVG.3YTO5Y.AVG")
    average_5_to_10_year: Detail = Field(default_factory=Detail, alias="CDN.AVG.5YTO10Y.AVG")
    average_over_10_year: Detail = Field(default_factory=Detail, alias="CDN.AVG.OVER.10.AVG")
    yield_2_year:         Detail = Field(default_factory=Detail, alias="BD.CDN.2YR.DQ.YLD")
    yield_3_year:         Detail = Field(default_factory=Detail, alias="BD.CDN.3YR.DQ.YLD")
    yield_5_year:         Detail = Field(default_factory=Detail, alias="BD.CDN.5YR.DQ.YLD")
    yield_7_year:         Detail = Field(default_factory=Detail, alias="BD.CDN.7YR.DQ.YLD")
    yield_10_year:        Detail = Field(default_factory=Detail, alias="BD.CDN.10YR.DQ.YLD")
    yield_long:           Detail = Field(default_factory=Detail, alias="BD.CDN.LONG.DQ.YLD")
    yield_rrb:            Detail = Field(default_factory=Detail, alias="BD.CDN.RRB.DQ.YLD")


class Observation(_Record):
    # One row per business day; series missing that day stay as Val(v="")
    d: str
    average_1_to_3_year:  Val = Field(default_factory=Val, alias="CDN.AVG.1YTO3Y.AVG")
    average_3_to_5_year:  Val = Field(default_factory=Val, alias="CDN.AVG.3YTO5Y.AVG")
    average_5_to_10_year: Val = Field(default_factory=Val, alias="CDN.AVG.5YTO10Y.AVG")
    average_over_10_year: Val = Field(default_factory=Val, alias="CDN.AVG.OVER.10.AVG")
    yield_2_year:         Val = Field(default_factory=Val, alias="BD.CDN.2YR.DQ.YLD")
    yield_3_year:         Val = Field(default_factory=Val, alias="BD.CDN.3YR.DQ.YLD")
    yield_5_year:         Val = Field(default_factory=Val, alias="BD.CDN.5YR.DQ.YLD")
    yield_7_year:         Val = Field(default_factory=Val, alias="BD.CDN.7YR.DQ.YLD")
    yield_10_year:        Val = Field(default_factory=Val, alias="BD.CDN.10YR.DQ.YLD")
    yield_long:           Val = Field(default_factory=Val, alias="BD.CDN.LONG.DQ.YLD")
    yield_rrb:            Val = Field(default_factory=Val, alias="BD.CDN.RRB.DQ.YLD")

    def series_values(self) -> dict[str, str]:
        """Series attribute -> published value ("" when absent)."""
        return {name: getattr(self, name).v for name in SERIES_KEYS}

    def __str__(self):
        shown = ", ".join(f"{k}={v}" for k, v in self.series_values().items() if v)
        return f"Observation {self.d} ({shown})"


class BOCData(_Record):
    group_detail:  GroupDetail = Field(default_factory=GroupDetail, alias="groupDetail")
    terms:         Terms = Field(default_factory=Terms)
    series_detail: SeriesDetail = Field(default_factory=SeriesDetail, alias="seriesDetail")
    observations:  List[Observation] = Field(default_factory=list)
