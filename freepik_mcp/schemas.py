"""
Freepik request and response shapes.

Input models validate tool arguments at the boundary: unknown fields are
rejected and numeric fields must be real integers. Response shapes are
TypedDicts describing what the remote API returns; the client passes the
decoded bodies through untouched.
"""

from typing import List, Literal, Optional, TypedDict, get_args

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

# ==============================================================================
# Enumerations
# ==============================================================================

SearchOrder = Literal["relevance", "recent"]
PeopleNumber = Literal["1", "2", "3", "more_than_three"]
PeopleAge = Literal["infant", "child", "teen", "young-adult", "adult", "senior", "elder"]
PeopleGender = Literal["male", "female"]
PeopleEthnicity = Literal[
    "south-asian", "middle-eastern", "east-asian", "black",
    "hispanic", "indian", "white", "multiracial",
]
Color = Literal[
    "black", "blue", "gray", "green", "orange", "red",
    "white", "yellow", "purple", "cyan", "pink",
]

Resolution = Literal["2k", "4k"]
AspectRatio = Literal[
    "square_1_1", "classic_4_3", "traditional_3_4",
    "widescreen_16_9", "social_story_9_16",
]
Engine = Literal["automatic", "magnific_illusio", "magnific_sharpy", "magnific_sparkle"]

SEARCH_ORDERS = get_args(SearchOrder)
PEOPLE_NUMBERS = get_args(PeopleNumber)
PEOPLE_AGES = get_args(PeopleAge)
PEOPLE_GENDERS = get_args(PeopleGender)
PEOPLE_ETHNICITIES = get_args(PeopleEthnicity)
COLORS = get_args(Color)
RESOLUTIONS = get_args(Resolution)
ASPECT_RATIOS = get_args(AspectRatio)
ENGINES = get_args(Engine)

CREATIVE_DETAILING_MIN = 0
CREATIVE_DETAILING_MAX = 100


class _InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ==============================================================================
# Stock resources
# ==============================================================================

class OrientationFilter(_InputModel):
    landscape: Optional[StrictBool] = None
    portrait: Optional[StrictBool] = None
    square: Optional[StrictBool] = None
    panoramic: Optional[StrictBool] = None


class ContentTypeFilter(_InputModel):
    photo: Optional[StrictBool] = None
    psd: Optional[StrictBool] = None
    vector: Optional[StrictBool] = None


class LicenseFilter(_InputModel):
    freemium: Optional[StrictBool] = None
    premium: Optional[StrictBool] = None


class PeopleFilter(_InputModel):
    include: Optional[StrictBool] = None
    exclude: Optional[StrictBool] = None
    number: Optional[PeopleNumber] = None
    age: Optional[PeopleAge] = None
    gender: Optional[PeopleGender] = None
    ethnicity: Optional[PeopleEthnicity] = None


class SearchFilters(_InputModel):
    orientation: Optional[OrientationFilter] = None
    content_type: Optional[ContentTypeFilter] = None
    license: Optional[LicenseFilter] = None
    people: Optional[PeopleFilter] = None
    color: Optional[Color] = None


class SearchResourcesParams(_InputModel):
    term: Optional[StrictStr] = None
    page: Optional[StrictInt] = Field(default=None, ge=1)
    limit: Optional[StrictInt] = Field(default=None, ge=1)
    order: Optional[SearchOrder] = None
    filters: Optional[SearchFilters] = None


class ResourceIdParams(_InputModel):
    id: StrictInt = Field(ge=1)


# ==============================================================================
# Mystic image generation
# ==============================================================================

class GenerateImageParams(_InputModel):
    prompt: StrictStr = Field(min_length=1)
    resolution: Optional[Resolution] = None
    aspect_ratio: Optional[AspectRatio] = None
    structure_reference: Optional[StrictStr] = None
    style_reference: Optional[StrictStr] = None
    realism: Optional[StrictBool] = None
    engine: Optional[Engine] = None
    creative_detailing: Optional[StrictInt] = Field(
        default=None, ge=CREATIVE_DETAILING_MIN, le=CREATIVE_DETAILING_MAX
    )
    filter_nsfw: Optional[StrictBool] = None


class CheckStatusParams(_InputModel):
    task_id: StrictStr = Field(min_length=1)


# ==============================================================================
# Remote responses
# ==============================================================================

class License(TypedDict):
    type: Literal["freemium", "premium"]
    url: str


class ImageSource(TypedDict):
    url: str
    key: str
    size: str


class ImageInfo(TypedDict):
    type: Literal["photo", "vector", "psd"]
    orientation: Literal["horizontal", "vertical", "square", "panoramic", "unknown"]
    source: ImageSource


class Author(TypedDict):
    id: int
    name: str
    avatar: str
    assets: int
    slug: str


class Stats(TypedDict):
    downloads: int
    likes: int


class ResourceResponse(TypedDict):
    id: int
    title: str
    url: str
    filename: str
    licenses: List[License]
    image: ImageInfo
    author: Author
    stats: Stats


class PaginationMeta(TypedDict):
    current_page: int
    last_page: int
    per_page: int
    total: int


class SearchResourcesResponse(TypedDict):
    data: List[ResourceResponse]
    meta: PaginationMeta


class DownloadResponse(TypedDict):
    url: str


class GenerateImageResponse(TypedDict):
    task_id: str
    status: str


class CheckStatusResponse(TypedDict, total=False):
    status: str
    generated: List[str]
