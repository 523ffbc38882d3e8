"""Закрытые перечисления API с политикой регистра, заданной для каждого типа отдельно."""

from enum import Enum
from typing import Any, Callable, Optional, Type, TypeVar

from pydantic_core import core_schema

from noaa_weather.errors import InvalidEnumValue

E = TypeVar("E", bound="ClosedEnum")


class CasePolicy(Enum):
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"


CASE_SENSITIVE = CasePolicy.CASE_SENSITIVE
CASE_INSENSITIVE = CasePolicy.CASE_INSENSITIVE


class ClosedEnum(str, Enum):
    """Значение из фиксированного списка строк API.

    value участника - каноническая форма (она же отображение). Разбор
    идёт по to_wire_string() с учётом политики регистра класса, которую
    задаёт декоратор closed_enum. Неизвестная строка даёт InvalidEnumValue,
    подстановки значения по умолчанию нет.
    """

    @classmethod
    def case_policy(cls) -> CasePolicy:
        return getattr(cls, "_case_policy", CASE_SENSITIVE)

    @classmethod
    def default(cls: Type[E]) -> E:
        name = getattr(cls, "_default_name", None)
        return cls[name] if name else next(iter(cls))

    @classmethod
    def parse(cls: Type[E], value: Any) -> E:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidEnumValue(cls.__name__, value)
        if cls.case_policy() is CASE_INSENSITIVE:
            wanted = value.lower()
            for member in cls:
                if member.to_wire_string().lower() == wanted:
                    return member
        else:
            for member in cls:
                if member.to_wire_string() == value:
                    return member
        raise InvalidEnumValue(cls.__name__, value)

    def to_wire_string(self) -> str:
        return self.value

    def display(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.display()

    def __format__(self, format_spec: str) -> str:
        return format(self.display(), format_spec)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda member: member.to_wire_string()),
        )


def closed_enum(policy: CasePolicy, default: Optional[str] = None) -> Callable[[Type[E]], Type[E]]:
    """Задать перечислению политику регистра и вариант по умолчанию."""
    def decorate(cls: Type[E]) -> Type[E]:
        cls._case_policy = policy
        cls._default_name = default
        return cls
    return decorate


def _build(name: str, codes: str, policy: CasePolicy, default: Optional[str] = None) -> Any:
    """Собрать перечисление из строки кодов, разделённых пробелами."""
    cls = ClosedEnum(name, [(code, code) for code in codes.split()], module=__name__)
    return closed_enum(policy, default)(cls)


# ============================================================================
# ОПОВЕЩЕНИЯ
# ============================================================================

@closed_enum(CASE_SENSITIVE, default="UNKNOWN")
class AlertSeverity(ClosedEnum):
    EXTREME = "Extreme"
    SEVERE = "Severe"
    MODERATE = "Moderate"
    MINOR = "Minor"
    UNKNOWN = "Unknown"


@closed_enum(CASE_INSENSITIVE, default="UNKNOWN")
class AlertUrgency(ClosedEnum):
    IMMEDIATE = "Immediate"
    EXPECTED = "Expected"
    FUTURE = "Future"
    PAST = "Past"
    UNKNOWN = "Unknown"


@closed_enum(CASE_SENSITIVE, default="OBSERVED")
class AlertCertainty(ClosedEnum):
    OBSERVED = "Observed"
    LIKELY = "Likely"
    POSSIBLE = "Possible"
    UNLIKELY = "Unlikely"
    UNKNOWN = "Unknown"


@closed_enum(CASE_INSENSITIVE, default="ACTUAL")
class AlertStatus(ClosedEnum):
    ACTUAL = "Actual"
    EXERCISE = "Exercise"
    SYSTEM = "System"
    TEST = "Test"
    DRAFT = "Draft"

    def to_wire_string(self) -> str:
        return self.value.lower()


@closed_enum(CASE_SENSITIVE, default="ALERT")
class AlertMessageType(ClosedEnum):
    ALERT = "Alert"
    UPDATE = "Update"
    CANCEL = "Cancel"
    ACK = "Ack"
    ERROR = "Error"


@closed_enum(CASE_SENSITIVE, default="MET")
class AlertCategory(ClosedEnum):
    MET = "Met"
    GEO = "Geo"
    SAFETY = "Safety"
    SECURITY = "Security"
    RESCUE = "Rescue"
    FIRE = "Fire"
    HEALTH = "Health"
    ENV = "Env"
    TRANSPORT = "Transport"
    INFRA = "Infra"
    CBRNE = "CBRNE"
    OTHER = "Other"


@closed_enum(CASE_SENSITIVE, default="NONE")
class AlertResponse(ClosedEnum):
    SHELTER = "Shelter"
    EVACUATE = "Evacuate"
    PREPARE = "Prepare"
    EXECUTE = "Execute"
    AVOID = "Avoid"
    MONITOR = "Monitor"
    ASSESS = "Assess"
    ALL_CLEAR = "AllClear"
    NONE = "None"


# ============================================================================
# ЗОНЫ, РЕГИОНЫ, КОДЫ ТЕРРИТОРИЙ
# ============================================================================

@closed_enum(CASE_INSENSITIVE, default="LAND")
class NwsZoneType(ClosedEnum):
    LAND = "land"
    MARINE = "marine"
    FORECAST = "forecast"
    PUBLIC = "public"
    COASTAL = "coastal"
    OFFSHORE = "offshore"
    FIRE = "fire"
    COUNTY = "county"


@closed_enum(CASE_INSENSITIVE, default="LAND")
class RegionType(ClosedEnum):
    LAND = "land"
    MARINE = "marine"


StateTerritoryCode = _build(
    "StateTerritoryCode",
    "AL AK AS AR AZ CA CO CT DE DC FL GA GU HI ID IL IN IA KS KY LA ME MD MA MI MN MS MO MT "
    "NE NV NH NJ NM NY NC ND OH OK OR PA PR RI SC SD TN TX UT VT VI VA WA WV WI WY MP PW FM MH",
    CASE_INSENSITIVE,
    default="AL",
)

MarineAreaCode = _build(
    "MarineAreaCode",
    "AM AN GM LC LE LH LM LO LS PH PK PM PS PZ SL",
    CASE_INSENSITIVE,
    default="AM",
)

MarineRegionCode = _build("MarineRegionCode", "AL AT GL GM PA PI", CASE_INSENSITIVE, default="AL")

LandRegionCode = _build("LandRegionCode", "AR CR ER PR SR WR", CASE_INSENSITIVE, default="AR")


# ============================================================================
# ОФИСЫ NWS
# ============================================================================

NwsForecastOfficeId = _build(
    "NwsForecastOfficeId",
    "AKQ ALY BGM BOX BTV BUF CAE CAR CHS CLE CTP GSP GYX ILM ILN LWX MHX OKX PBZ PHI RAH RLX RNK "
    "ABQ AMA BMX BRO CRP EPZ EWX FFC FWD HGX HUN JAN JAX KEY LCH LIX LUB LZK MAF MEG MFL MLB MOB "
    "MRX OHX OUN SHV SJT SJU TAE TBW TSA ABR APX ARX BIS BOU CYS DDC DLH DMX DTX DVN EAX FGF FSD "
    "GID GJT GLD GRB GRR ICT ILX IND IWX JKL LBF LMK LOT LSX MKX MPX MQT OAX PAH PUB RIW SGF TOP "
    "UNR BOI BYZ EKA FGZ GGW HNX LKN LOX MFR MSO MTR OTX PDT PIH PQR PSR REV SEW SGX SLC STO TFX "
    "TWC VEF AER AFC AFG AJK ALU GUM HPA HFO PPG STU NH1 NH2 ONA ONP PQE PQW",
    CASE_INSENSITIVE,
)

NwsCenterWeatherServiceUnitId = _build(
    "NwsCenterWeatherServiceUnitId",
    "ZAB ZAN ZAU ZBW ZDC ZDV ZFA ZFW ZHU ZID ZJX ZKC ZLA ZLC ZMA ZME ZMP ZNY ZOA ZOB ZSE ZTL",
    CASE_INSENSITIVE,
)

NwsRegionalHq = _build("NwsRegionalHq", "ARH CRH ERH PRH SRH WRH", CASE_INSENSITIVE)


# ============================================================================
# РАДАРЫ
# ============================================================================

@closed_enum(CASE_INSENSITIVE, default="RDS")
class RadarQueueHost(ClosedEnum):
    RDS = "rds"
    TDS = "tds"


# ============================================================================
# ПРОГНОЗЫ
# ============================================================================

@closed_enum(CASE_INSENSITIVE, default="US")
class GridpointForecastUnits(ClosedEnum):
    US = "us"
    SI = "si"


@closed_enum(CASE_SENSITIVE, default="F")
class TemperatureUnit(ClosedEnum):
    F = "F"
    C = "C"


@closed_enum(CASE_SENSITIVE, default="RISING")
class TemperatureTrend(ClosedEnum):
    RISING = "rising"
    FALLING = "falling"


WindDirection = _build(
    "WindDirection",
    "N NNE NE ENE E ESE SE SSE S SSW SW WSW W WNW NW NNW",
    CASE_SENSITIVE,
)


@closed_enum(CASE_SENSITIVE, default="AREAS")
class WeatherCoverage(ClosedEnum):
    AREAS = "areas"
    BRIEF = "brief"
    CHANCE = "chance"
    DEFINITE = "definite"
    FEW = "few"
    FREQUENT = "frequent"
    INTERMITTENT = "intermittent"
    ISOLATED = "isolated"
    LIKELY = "likely"
    NUMEROUS = "numerous"
    OCCASIONAL = "occasional"
    PATCHY = "patchy"
    PERIODS = "periods"
    SCATTERED = "scattered"
    SLIGHT_CHANCE = "slight_chance"
    WIDESPREAD = "widespread"


@closed_enum(CASE_SENSITIVE, default="BLOWING_DUST")
class WeatherType(ClosedEnum):
    BLOWING_DUST = "blowing_dust"
    BLOWING_SAND = "blowing_sand"
    BLOWING_SNOW = "blowing_snow"
    DRIZZLE = "drizzle"
    FOG = "fog"
    FREEZING_FOG = "freezing_fog"
    FREEZING_DRIZZLE = "freezing_drizzle"
    FREEZING_RAIN = "freezing_rain"
    FREEZING_SPRAY = "freezing_spray"
    FROST = "frost"
    HAIL = "hail"
    HAZE = "haze"
    ICE_CRYSTALS = "ice_crystals"
    ICE_FOG = "ice_fog"
    RAIN = "rain"
    RAIN_SHOWERS = "rain_showers"
    SLEET = "sleet"
    SMOKE = "smoke"
    SNOW = "snow"
    SNOW_SHOWERS = "snow_showers"
    THUNDERSTORMS = "thunderstorms"
    VOLCANIC_ASH = "volcanic_ash"
    WATER_SPOUTS = "water_spouts"


@closed_enum(CASE_SENSITIVE, default="VERY_LIGHT")
class WeatherIntensity(ClosedEnum):
    VERY_LIGHT = "very_light"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


@closed_enum(CASE_SENSITIVE, default="DAMAGING_WIND")
class WeatherAttribute(ClosedEnum):
    DAMAGING_WIND = "damaging_wind"
    DRY_THUNDERSTORMS = "dry_thunderstorms"
    FLOODING = "flooding"
    GUSTY_WIND = "gusty_wind"
    HEAVY_RAIN = "heavy_rain"
    LARGE_HAIL = "large_hail"
    SMALL_HAIL = "small_hail"
    TORNADOES = "tornadoes"


# ============================================================================
# METAR
# ============================================================================

@closed_enum(CASE_SENSITIVE, default="CLR")
class MetarSkyCoverage(ClosedEnum):
    OVC = "OVC"
    BKN = "BKN"
    SCT = "SCT"
    FEW = "FEW"
    SKC = "SKC"
    CLR = "CLR"
    VV = "VV"


@closed_enum(CASE_SENSITIVE, default="LIGHT")
class MetarIntensity(ClosedEnum):
    LIGHT = "light"
    HEAVY = "heavy"


@closed_enum(CASE_SENSITIVE, default="PATCHES")
class MetarModifier(ClosedEnum):
    PATCHES = "patches"
    BLOWING = "blowing"
    LOW_DRIFTING = "low_drifting"
    FREEZING = "freezing"
    SHALLOW = "shallow"
    PARTIAL = "partial"
    SHOWERS = "showers"


@closed_enum(CASE_SENSITIVE, default="UNKNOWN")
class MetarWeather(ClosedEnum):
    FOG_MIST = "fog_mist"
    DUST_STORM = "dust_storm"
    DUST = "dust"
    DRIZZLE = "drizzle"
    FUNNEL_CLOUD = "funnel_cloud"
    FOG = "fog"
    SMOKE = "smoke"
    HAIL = "hail"
    SNOW_PELLETS = "snow_pellets"
    HAZE = "haze"
    ICE_CRYSTALS = "ice_crystals"
    ICE_PELLETS = "ice_pellets"
    DUST_WHIRLS = "dust_whirls"
    SPRAY = "spray"
    RAIN = "rain"
    SAND = "sand"
    SNOW_GRAINS = "snow_grains"
    SNOW = "snow"
    SQUALLS = "squalls"
    SAND_STORM = "sand_storm"
    THUNDERSTORMS = "thunderstorms"
    UNKNOWN = "unknown"
    VOLCANIC_ASH = "volcanic_ash"


# ============================================================================
# КОНТРОЛЬ КАЧЕСТВА И ЕДИНИЦЫ
# ============================================================================

_QC_DESCRIPTIONS = {
    "Z": "Preliminary, no QC",
    "C": "Coarse pass, passed level 1",
    "S": "Screened, passed levels 1 and 2",
    "V": "Verified, passed levels 1, 2, and 3",
    "X": "Rejected/erroneous, failed level 1",
    "Q": "Questioned, passed level 1, failed 2 or 3",
    "G": "Subjective good",
    "B": "Subjective bad",
    "T": "Virtual temperature could not be calculated, "
         "air temperature passing all QC checks has been returned",
}


@closed_enum(CASE_SENSITIVE, default="Z")
class QualityControl(ClosedEnum):
    """Флаги контроля качества MADIS."""

    Z = "Z"
    C = "C"
    S = "S"
    V = "V"
    X = "X"
    Q = "Q"
    G = "G"
    B = "B"
    T = "T"

    def description(self) -> str:
        return _QC_DESCRIPTIONS[self.value]


_NWS_UNIT_LABELS = {
    "nwsUnit:s": ("second", "s", "s"),
    "nwsUnit:ns": ("nanosecond", "ns", "ns"),
    "nwsUnit:MHz": ("megahertz", "MHz", "MHz"),
    "nwsUnit:dBZ": ("decibelZ", "dBz", "dBz"),
    "nwsUnit:dB": ("decibel", "dB", "dB"),
}


@closed_enum(CASE_SENSITIVE, default="SECOND")
class NwsUnitCode(ClosedEnum):
    """Единицы пространства nwsUnit. Коды wmoUnit в перечисление не входят."""

    SECOND = "nwsUnit:s"
    NANOSECOND = "nwsUnit:ns"
    MEGAHERTZ = "nwsUnit:MHz"
    DECIBEL_Z = "nwsUnit:dBZ"
    DECIBEL = "nwsUnit:dB"

    def pref_label(self) -> str:
        return _NWS_UNIT_LABELS[self.value][0]

    def notation(self) -> str:
        return _NWS_UNIT_LABELS[self.value][1]

    def alt_label(self) -> str:
        return _NWS_UNIT_LABELS[self.value][2]
