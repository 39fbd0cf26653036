"""
Google Geocoding API Enums

String enums mapping to the codes documented by the service. Being StrEnum,
every member can be placed straight into a query string.
"""

from enum import StrEnum
from typing import Dict


class Language(StrEnum):
    """
    Language in which results are returned

    https://developers.google.com/maps/faq#languagesupport
    """

    ARABIC = "ar"
    BULGARIAN = "bg"
    BENGALI = "bn"
    CATALAN = "ca"
    CZECH = "cs"
    DANISH = "da"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    ENGLISH_AUSTRALIAN = "en-AU"
    ENGLISH_GREAT_BRITAIN = "en-GB"
    SPANISH = "es"
    BASQUE = "eu"
    FARSI = "fa"
    FINNISH = "fi"
    FILIPINO = "fil"
    FRENCH = "fr"
    GALICIAN = "gl"
    GUJARATI = "gu"
    HINDI = "hi"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    HEBREW = "iw"
    JAPANESE = "ja"
    KANNADA = "kn"
    KOREAN = "ko"
    LITHUANIAN = "lt"
    LATVIAN = "lv"
    MALAYALAM = "ml"
    MARATHI = "mr"
    DUTCH = "nl"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt-BR"
    PORTUGUESE_PORTUGAL = "pt-PT"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SERBIAN = "sr"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TAGALOG = "tl"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_TRADITIONAL = "zh-TW"


class Region(StrEnum):
    """
    Region bias, as a country code top-level domain without the leading dot

    https://icannwiki.org/Country_code_top-level_domain
    """

    ASCENSION_ISLAND = "ac"
    ANDORRA = "ad"
    UNITED_ARAB_EMIRATES = "ae"
    AFGHANISTAN = "af"
    ANTIGUA_AND_BARBUDA = "ag"
    ANGUILLA = "ai"
    ALBANIA = "al"
    ARMENIA = "am"
    ANTILLES_NETHERLANDS = "an"
    ANGOLA = "ao"
    ANTARCTICA = "aq"
    ARGENTINA = "ar"
    AMERICAN_SAMOA = "as"
    AUSTRIA = "at"
    AUSTRALIA = "au"
    ARUBA = "aw"
    ALAND_ISLANDS = "ax"
    AZERBAIJAN = "az"
    BOSNIA_AND_HERZEGOVINA = "ba"
    BARBADOS = "bb"
    BANGLADESH = "bd"
    BELGIUM = "be"
    BURKINA_FASO = "bf"
    BULGARIA = "bg"
    BAHRAIN = "bh"
    BURUNDI = "bi"
    BENIN = "bj"
    SAINT_BARTHELEMY = "bl"
    BERMUDA = "bm"
    BRUNEI_DARUSSALAM = "bn"
    BOLIVIA = "bo"
    BONAIRE_SINT_EUSTATIUS_AND_SABA = "bq"
    BRAZIL = "br"
    BAHAMAS = "bs"
    BHUTAN = "bt"
    BOUVET_ISLAND = "bv"
    BOTSWANA = "bw"
    BELARUS = "by"
    BELIZE = "bz"
    CANADA = "ca"
    COCOS_ISLANDS = "cc"
    DEMOCRATIC_REPUBLIC_OF_THE_CONGO = "cd"
    CENTRAL_AFRICAN_REPUBLIC = "cf"
    REPUBLIC_OF_CONGO = "cg"
    SWITZERLAND = "ch"
    COTE_DIVOIRE = "ci"
    COOK_ISLANDS = "ck"
    CHILE = "cl"
    CAMEROON = "cm"
    CHINA = "cn"
    COLOMBIA = "co"
    COSTA_RICA = "cr"
    CUBA = "cu"
    CAPE_VERDE = "cv"
    CURACAO = "cw"
    CHRISTMAS_ISLAND = "cx"
    CYPRUS = "cy"
    CZECH_REPUBLIC = "cz"
    GERMANY = "de"
    DJIBOUTI = "dj"
    DENMARK = "dk"
    DOMINICA = "dm"
    DOMINICAN_REPUBLIC = "do"
    ALGERIA = "dz"
    ECUADOR = "ec"
    ESTONIA = "ee"
    EGYPT = "eg"
    WESTERN_SAHARA = "eh"
    ERITREA = "er"
    SPAIN = "es"
    ETHIOPIA = "et"
    EUROPEAN_UNION = "eu"
    FINLAND = "fi"
    FIJI = "fj"
    FALKLAND_ISLANDS = "fk"
    FEDERATED_STATES_OF_MICRONESIA = "fm"
    FAROE_ISLANDS = "fo"
    FRANCE = "fr"
    GABON = "ga"
    GRENADA = "gd"
    GEORGIA = "ge"
    FRENCH_GUIANA = "gf"
    GUERNSEY = "gg"
    GHANA = "gh"
    GIBRALTAR = "gi"
    GREENLAND = "gl"
    GAMBIA = "gm"
    GUINEA = "gn"
    GUADELOUPE = "gp"
    EQUATORIAL_GUINEA = "gq"
    GREECE = "gr"
    SOUTH_GEORGIA_AND_THE_SOUTH_SANDWICH_ISLANDS = "gs"
    GUATEMALA = "gt"
    GUAM = "gu"
    GUINEA_BISSAU = "gw"
    GUYANA = "gy"
    HONG_KONG = "hk"
    HEARD_ISLAND_AND_MC_DONALD_ISLANDS = "hm"
    HONDURAS = "hn"
    CROATIA = "hr"
    HAITI = "ht"
    HUNGARY = "hu"
    INDONESIA = "id"
    IRELAND = "ie"
    ISRAEL = "il"
    ISLE_OF_MAN = "im"
    INDIA = "in"
    BRITISH_INDIAN_OCEAN_TERRITORY = "io"
    IRAQ = "iq"
    ISLAMIC_REPUBLIC_OF_IRAN = "ir"
    ICELAND = "is"
    ITALY = "it"
    JERSEY = "je"
    JAMAICA = "jm"
    JORDAN = "jo"
    JAPAN = "jp"
    KENYA = "ke"
    KYRGYZSTAN = "kg"
    CAMBODIA = "kh"
    KIRIBATI = "ki"
    COMOROS = "km"
    SAINT_KITTS_AND_NEVIS = "kn"
    DEMOCRATIC_PEOPLES_REPUBLIC_OF_KOREA = "kp"
    REPUBLIC_OF_KOREA = "kr"
    KUWAIT = "kw"
    CAYMEN_ISLANDS = "ky"
    KAZAKHSTAN = "kz"
    LAOS = "la"
    LEBANON = "lb"
    SAINT_LUCIA = "lc"
    LIECHTENSTEIN = "li"
    SRI_LANKA = "lk"
    LIBERIA = "lr"
    LESOTHO = "ls"
    LITHUANIA = "lt"
    LUXEMBOURG = "lu"
    LATVIA = "lv"
    LIBYA = "ly"
    MOROCCO = "ma"
    MONACO = "mc"
    REPUBLIC_OF_MOLDOVA = "md"
    MONTENEGRO = "me"
    SAINT_MARTIN = "mf"
    MADAGASCAR = "mg"
    MARSHALL_ISLANDS = "mh"
    MACEDONIA = "mk"
    MALI = "ml"
    MYANMAR = "mm"
    MONGOLIA = "mn"
    MACAO = "mo"
    NORTHERN_MARIANA_ISLANDS = "mp"
    MARTINIQUE = "mq"
    MAURITANIA = "mr"
    MONTSERRAT = "ms"
    MALTA = "mt"
    MAURITIUS = "mu"
    MALDIVES = "mv"
    MALAWI = "mw"
    MEXICO = "mx"
    MALAYSIA = "my"
    MOZAMBIQUE = "mz"
    NAMIBIA = "na"
    NEW_CALEDONIA = "nc"
    NIGER = "ne"
    NORFOLK_ISLAND = "nf"
    NIGERIA = "ng"
    NICARAGUA = "ni"
    NETHERLANDS = "nl"
    NORWAY = "no"
    NEPAL = "np"
    NAURU = "nr"
    NIUE = "nu"
    NEW_ZEALAND = "nz"
    OMAN = "om"
    PANAMA = "pa"
    PERU = "pe"
    FRENCH_POLYNESIA = "pf"
    PAPUA_NEW_GUINEA = "pg"
    PHILIPPINES = "ph"
    PAKISTAN = "pk"
    POLAND = "pl"
    SAINT_PIERRE_AND_MIQUELON = "pm"
    PITCAIRN = "pn"
    PUERTO_RICO = "pr"
    PALESTINE = "ps"
    PORTUGAL = "pt"
    PALAU = "pw"
    PARAGUAY = "py"
    QATAR = "qa"
    REUNION = "re"
    ROMANIA = "ro"
    SERBIA = "rs"
    RUSSIA = "ru"
    RWANDA = "rw"
    SAUDI_ARABIA = "sa"
    SOLOMON_ISLANDS = "sb"
    SEYCHELLES = "sc"
    SUDAN = "sd"
    SWEDEN = "se"
    SINGAPORE = "sg"
    SAINT_HELENA = "sh"
    SLOVENIA = "si"
    SVALBARD_AND_JAN_MAYEN = "sj"
    SLOVAKIA = "sk"
    SIERRA_LEONE = "sl"
    SAN_MARINO = "sm"
    SENEGAL = "sn"
    SOMALIA = "so"
    SURINAME = "sr"
    SOUTH_SUDAN = "ss"
    SAO_TOME_AND_PRINCIPE = "st"
    SOVIET_UNION = "su"
    EL_SALVADOR = "sv"
    SINT_MAARTEN = "sx"
    SYRIA = "sy"
    SWAZILAND = "sz"
    TURKS_AND_CAICOS_ISLANDS = "tc"
    CHAD = "td"
    FRENCH_SOUTHERN_TERRITORIES = "tf"
    TOGO = "tg"
    THAILAND = "th"
    TAJIKISTAN = "tj"
    TOKELAU = "tk"
    TIMOR_LESTE = "tl"
    TURKMENISTAN = "tm"
    TUNISIA = "tn"
    TONGA = "to"
    PORTUGUESE_TIMOR = "tp"
    TURKEY = "tr"
    TRINIDAD_AND_TOBAGO = "tt"
    TUVALU = "tv"
    TAIWAN = "tw"
    TANZANIA = "tz"
    UKRAINE = "ua"
    UGANDA = "ug"
    UNITED_KINGDOM = "uk"
    UNITED_STATES_MINOR_OUTLYING_ISLANDS = "um"
    UNITED_STATES = "us"
    URUGUAY = "uy"
    UZBEKISTAN = "uz"
    VATICAN_CITY = "va"
    SAINT_VINCENT_AND_THE_GRENADINES = "vc"
    VENEZUELA = "ve"
    BRITISH_VIRGIN_ISLANDS = "vg"
    US_VIRGIN_ISLANDS = "vi"
    VIETNAM = "vn"
    VANUATU = "vu"
    WALLIS_AND_FUTUNA = "wf"
    SAMOA = "ws"
    MAYOTTE = "yt"
    SOUTH_AFRICA = "za"
    ZAMBIA = "zm"
    ZIMBABWE = "zw"


class LocationType(StrEnum):
    """
    What the location of a geometry refers to
    """

    ROOFTOP = "ROOFTOP"
    """Precise geocode, accurate down to street address precision."""
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    """Approximation (usually on a road) interpolated between two precise points."""
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    """Geometric center of a polyline (a street) or polygon (a region)."""
    APPROXIMATE = "APPROXIMATE"
    """The result is approximate."""


class AddressType(StrEnum):
    """
    Type of an address component or of a result (street, intersection, etc)
    """

    STREET_ADDRESS = "street_address"
    ROUTE = "route"
    INTERSECTION = "intersection"
    POLITICAL = "political"
    COUNTRY = "country"
    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"
    ADMINISTRATIVE_AREA_LEVEL_3 = "administrative_area_level_3"
    ADMINISTRATIVE_AREA_LEVEL_4 = "administrative_area_level_4"
    ADMINISTRATIVE_AREA_LEVEL_5 = "administrative_area_level_5"
    COLLOQUIAL_AREA = "colloquial_area"
    LOCALITY = "locality"
    WARD = "ward"
    SUBLOCALITY = "sublocality"
    SUBLOCALITY_LEVEL_1 = "sublocality_level_1"
    SUBLOCALITY_LEVEL_2 = "sublocality_level_2"
    SUBLOCALITY_LEVEL_3 = "sublocality_level_3"
    SUBLOCALITY_LEVEL_4 = "sublocality_level_4"
    SUBLOCALITY_LEVEL_5 = "sublocality_level_5"
    NEIGHBORHOOD = "neighborhood"
    PREMISE = "premise"
    SUBPREMISE = "subpremise"
    PLUS_CODE = "plus_code"
    POSTAL_CODE = "postal_code"
    POSTAL_CODE_PREFIX = "postal_code_prefix"
    POSTAL_CODE_SUFFIX = "postal_code_suffix"
    NATURAL_FEATURE = "natural_feature"
    AIRPORT = "airport"
    PARK = "park"
    POINT_OF_INTEREST = "point_of_interest"
    FLOOR = "floor"
    ESTABLISHMENT = "establishment"
    LANDMARK = "landmark"
    PARKING = "parking"
    POST_BOX = "post_box"
    POSTAL_TOWN = "postal_town"
    ROOM = "room"
    STREET_NUMBER = "street_number"
    BUS_STATION = "bus_station"
    TRAIN_STATION = "train_station"
    TRANSIT_STATION = "transit_station"


class StatusCode(StrEnum):
    """
    Reply status of the geocoding API
    """

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @property
    def description(self) -> str:
        """Human readable explanation of the status."""
        return _STATUS_DESCRIPTIONS[self]

    @property
    def isSuccess(self) -> bool:
        """True for statuses that carry a (possibly empty) result list."""
        return self in (StatusCode.OK, StatusCode.ZERO_RESULTS)


_STATUS_DESCRIPTIONS: Dict[StatusCode, str] = {
    StatusCode.OK: "No errors occurred",
    StatusCode.ZERO_RESULTS: "Geocode was successful but returned no results",
    StatusCode.OVER_DAILY_LIMIT: "API key is missing or invalid, or billing is not enabled",
    StatusCode.OVER_QUERY_LIMIT: "You are over your quota",
    StatusCode.REQUEST_DENIED: "Request denied",
    StatusCode.INVALID_REQUEST: "Query component missing",
    StatusCode.UNKNOWN_ERROR: "Unknown error, the request may succeed if you try again",
}


class ComponentFilterKind(StrEnum):
    """
    Address component a component filter restricts
    """

    POSTAL_CODE = "postal_code"
    """Matches postal_code and postal_code_prefix."""
    COUNTRY = "country"
    """Matches a country name or a two letter ISO 3166-1 country code."""
    ROUTE = "route"
    """Matches the long or short name of a route."""
    LOCALITY = "locality"
    """Matches against locality and sublocality types."""
    ADMINISTRATIVE_AREA = "administrative_area"
    """Matches all the administrative_area levels."""
