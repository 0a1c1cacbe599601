"""Month and weekday names per (locale, calendar).

Tables are stored in the order a CLDR-backed platform reports them for each
calendar, which is not always the order the calendar counts its months in
(the Hebrew table starts at Tishri). :func:`month_names` finds the calendar's
first month in the English table and rotates the locale table by the same
offset, so every locale comes back in calendar-native order.
"""
from __future__ import annotations
from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

DEFAULT_LOCALE = "en"

MONTH_TABLES: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "gregory": {
        "en": ("January", "February", "March", "April", "May", "June", "July",
               "August", "September", "October", "November", "December"),
        "fa": ("ژانویه", "فوریه", "مارس", "آوریل", "مه", "ژوئن", "ژوئیه",
               "اوت", "سپتامبر", "اکتبر", "نوامبر", "دسامبر"),
        "ar": ("يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو", "يوليو",
               "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"),
        "he": ("ינואר", "פברואר", "מרץ", "אפריל", "מאי", "יוני", "יולי",
               "אוגוסט", "ספטמבר", "אוקטובר", "נובמבר", "דצמבר"),
        "fr": ("janvier", "février", "mars", "avril", "mai", "juin", "juillet",
               "août", "septembre", "octobre", "novembre", "décembre"),
        "de": ("Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
               "August", "September", "Oktober", "November", "Dezember"),
    },
    "persian": {
        "en": ("Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
               "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand"),
        "fa": ("فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
               "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند"),
    },
    "islamic": {
        "en": ("Muharram", "Safar", "Rabiʻ I", "Rabiʻ II", "Jumada I", "Jumada II",
               "Rajab", "Shaʻban", "Ramadan", "Shawwal", "Dhuʻl-Qiʻdah", "Dhuʻl-Hijjah"),
        "ar": ("محرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
               "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة"),
        "fa": ("محرم", "صفر", "ربیع‌الاول", "ربیع‌الثانی", "جمادی‌الاول", "جمادی‌الثانی",
               "رجب", "شعبان", "رمضان", "شوال", "ذیقعده", "ذیحجه"),
    },
    "hebrew": {
        "en": ("Tishri", "Heshvan", "Kislev", "Tevet", "Shevat", "Adar",
               "Nisan", "Iyar", "Sivan", "Tamuz", "Av", "Elul"),
        "he": ("תשרי", "חשוון", "כסלו", "טבת", "שבט", "אדר",
               "ניסן", "אייר", "סיוון", "תמוז", "אב", "אלול"),
    },
    "ethiopic": {
        "en": ("Meskerem", "Tekemt", "Hedar", "Tahsas", "Ter", "Yekatit", "Megabit",
               "Miazia", "Genbot", "Sene", "Hamle", "Nehasse", "Pagumen"),
        "am": ("መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት", "መጋቢት",
               "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜን"),
    },
    "amazigh": {
        "en": ("Yennayer", "Furar", "Meghres", "Yebrir", "Mayyu", "Yunyu",
               "Yulyuz", "Ghuct", "Cutanbir", "Ktuber", "Nunembir", "Dujembir"),
        "tzm": ("ⵉⵏⵏⴰⵢⵔ", "ⴱⵕⴰⵢⵕ", "ⵎⴰⵕⵚ", "ⵉⴱⵔⵉⵔ", "ⵎⴰⵢⵢⵓ", "ⵢⵓⵏⵢⵓ",
                "ⵢⵓⵍⵢⵓⵣ", "ⵖⵓⵛⵜ", "ⵛⵓⵜⴰⵏⴱⵉⵔ", "ⴽⵜⵓⴱⵕ", "ⵏⵓⵡⴰⵏⴱⵉⵔ", "ⴷⵓⵊⴰⵏⴱⵉⵔ"),
        "ar": ("يناير", "فورار", "مغرس", "يبرير", "مايو", "يونيو",
               "يوليوز", "غشت", "شتنبر", "كتوبر", "نونبر", "دجنبر"),
    },
    "chinese": {
        "en": ("Zhēngyuè", "Èryuè", "Sānyuè", "Sìyuè", "Wǔyuè", "Liùyuè",
               "Qīyuè", "Bāyuè", "Jiǔyuè", "Shíyuè", "Shíyīyuè", "Làyuè"),
        "zh": ("正月", "二月", "三月", "四月", "五月", "六月",
               "七月", "八月", "九月", "十月", "冬月", "腊月"),
    },
    "indian": {
        "en": ("Chaitra", "Vaisakha", "Jyaistha", "Asadha", "Sravana", "Bhadra",
               "Asvina", "Kartika", "Agrahayana", "Pausa", "Magha", "Phalguna"),
        "hi": ("चैत्र", "वैशाख", "ज्येष्ठ", "आषाढ़", "श्रावण", "भाद्रपद",
               "अश्विन", "कार्तिक", "अग्रहायण", "पौष", "माघ", "फाल्गुन"),
    },
    "mars": {
        "en": ("Sagittarius", "Dhanus", "Capricornus", "Makara", "Aquarius", "Kumbha",
               "Pisces", "Mina", "Aries", "Mesha", "Taurus", "Rishabha",
               "Gemini", "Mithuna", "Cancer", "Karka", "Leo", "Simha",
               "Virgo", "Kanya", "Libra", "Tula", "Scorpius", "Vrishika"),
    },
}

# Sunday first
WEEKDAY_TABLES: Dict[str, Tuple[str, ...]] = {
    "en": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    "fa": ("یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه"),
    "ar": ("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"),
    "he": ("יום ראשון", "יום שני", "יום שלישי", "יום רביעי", "יום חמישי", "יום שישי", "יום שבת"),
    "fr": ("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"),
    "de": ("Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag"),
}


def locale_candidates(locale: str) -> List[str]:
    """``"fa-IR"`` -> ``["fa-IR", "fa", "en"]``."""
    out = [locale]
    lang = locale.replace("_", "-").split("-", 1)[0]
    if lang and lang not in out:
        out.append(lang)
    if DEFAULT_LOCALE not in out:
        out.append(DEFAULT_LOCALE)
    return out


def _pick(table: Dict[str, Tuple[str, ...]], locale: str) -> Tuple[str, ...]:
    for cand in locale_candidates(locale):
        if cand in table:
            return table[cand]
    return table[DEFAULT_LOCALE]


def _rotate(names: Sequence[str], start: int) -> Tuple[str, ...]:
    return tuple(names[start:]) + tuple(names[:start])


@lru_cache(maxsize=None)
def month_names(locale: str, calendar: str, first_month_name: str) -> Tuple[str, ...]:
    """Month names for ``calendar`` in ``locale``, starting at ``first_month_name``.

    Unknown calendars fall back to the Gregorian table; an unknown first
    month leaves the platform order unchanged.
    """
    table = MONTH_TABLES.get(calendar, MONTH_TABLES["gregory"])
    english = table[DEFAULT_LOCALE]
    try:
        start = english.index(first_month_name)
    except ValueError:
        start = 0
    return _rotate(_pick(table, locale), start)


@lru_cache(maxsize=None)
def weekday_names(locale: str) -> Tuple[str, ...]:
    return _pick(WEEKDAY_TABLES, locale)


def short_names(names: Sequence[str], width: int = 3) -> List[str]:
    """Abbreviations for Latin-script names; other scripts are returned whole."""
    return [n[:width] if n.isascii() else n for n in names]
