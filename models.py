from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict


# Upstream payload models
# Every field is optional and unknown keys are kept: the proxy relays the
# upstream body verbatim and these models only describe its usual shape.
class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow")


class GlobalRankInfo(_Payload):
    Rank: Optional[int] = None


class CountryRankInfo(_Payload):
    Country: Optional[int] = None
    CountryCode: Optional[str] = None
    Rank: Optional[int] = None


class CategoryRankInfo(_Payload):
    Rank: Optional[Union[int, str]] = None
    Category: Optional[str] = None


class EngagementStats(_Payload):
    BounceRate: Optional[str] = None
    PagePerVisit: Optional[str] = None
    Visits: Optional[str] = None
    TimeOnSite: Optional[str] = None
    Month: Optional[str] = None
    Year: Optional[str] = None


class CountryShare(_Payload):
    Country: Optional[int] = None
    CountryCode: Optional[str] = None
    Value: Optional[float] = None


class TrafficReport(_Payload):
    GlobalRank: Optional[GlobalRankInfo] = None
    CountryRank: Optional[CountryRankInfo] = None
    CategoryRank: Optional[CategoryRankInfo] = None
    Engagments: Optional[EngagementStats] = None  # sic, provider spelling
    EstimatedMonthlyVisits: Optional[Dict[str, float]] = None
    TrafficSources: Optional[Dict[str, Optional[float]]] = None
    TopCountryShares: Optional[List[CountryShare]] = None
    Description: Optional[str] = None
    Title: Optional[str] = None
    Category: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
