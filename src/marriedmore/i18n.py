"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "결혼 반환점",
        "en": "MarriedMore",
    },
    "badge": {
        "ko": "오래가는 사랑을 축하하며",
        "en": "Celebrate lasting love",
    },
    "hero_title": {
        "ko": "나의 <span class='mm-accent'>MarriedMore</span> 날짜 찾기",
        "en": "Find your <span class='mm-accent'>MarriedMore</span> date",
    },
    "hero_subtitle": {
        "ko": "결혼한 시간이 결혼하지 않은 시간보다 길어지는 날.",
        "en": "The day you’ve officially spent more of your life married than not.",
    },
    "hero_note": {
        "ko": "함께한 매 해가 선물이라는 작은 알림.",
        "en": "A gentle reminder that every year together is a gift.",
    },
    "card_title": {
        "ko": "MarriedMore 계산기",
        "en": "MarriedMore calculator",
    },
    "card_description": {
        "ko": "간단 모드는 날짜만, 고급 모드는 시각까지 계산해요.",
        "en": "Choose a simple date-only view—or the exact time for extra clarity.",
    },
    "tab_basic": {
        "ko": "기본",
        "en": "Basic",
    },
    "tab_advanced": {
        "ko": "고급",
        "en": "Advanced",
    },
    "label_birth": {
        "ko": "생년월일",
        "en": "Date of birth",
    },
    "label_wedding": {
        "ko": "결혼일",
        "en": "Wedding date",
    },
    "label_birth_dt_date": {
        "ko": "나의 출생 날짜",
        "en": "Your date of birth",
    },
    "label_birth_dt_time": {
        "ko": "나의 출생 시각",
        "en": "Your time of birth",
    },
    "label_spouse_dt_date": {
        "ko": "배우자의 출생 날짜",
        "en": "Spouse’s date of birth",
    },
    "label_spouse_dt_time": {
        "ko": "배우자의 출생 시각",
        "en": "Spouse’s time of birth",
    },
    "label_wedding_dt_date": {
        "ko": "결혼 날짜",
        "en": "Wedding date",
    },
    "label_wedding_dt_time": {
        "ko": "결혼 시각",
        "en": "Wedding time",
    },
    "label_both": {
        "ko": "두 사람 모두 계산하기",
        "en": "Calculate for both of us",
    },
    "advanced_intro": {
        "ko": "결혼한 시간이 더 길어지는 정확한 순간을 확인하세요.",
        "en": "See the exact moment you’ll have been married more than not.",
    },
    "btn_basic": {
        "ko": "MarriedMore 날짜 계산",
        "en": "Calculate MarriedMore date",
    },
    "btn_advanced": {
        "ko": "정확한 MarriedMore 순간 계산",
        "en": "Calculate exact MarriedMore moment",
    },
    "btn_save": {
        "ko": "↓ 타임라인 저장",
        "en": "↓ Save timeline",
    },
    "hint_basic": {
        "ko": "날짜를 입력하면 결혼한 시간이 더 길어지는 날을 알려드려요.",
        "en": "Enter your dates to see when you’ll have been married more than not.",
    },
    "hint_advanced": {
        "ko": "날짜와 시각을 입력하면 결혼한 시간이 더 길어지는 정확한 순간을 알려드려요.",
        "en": "Enter your dates to see the exact moment you’ll have been married more than not.",
    },
    "error_heading": {
        "ko": "계속하기 전에 날짜를 확인해 주세요.",
        "en": "Let’s fix a couple of dates before we continue.",
    },
    "error_missing_basic": {
        "ko": "생년월일과 결혼일을 입력해 주세요.",
        "en": "Please enter your date of birth and wedding date.",
    },
    "error_missing_advanced": {
        "ko": "출생 날짜·시각과 결혼 날짜·시각을 입력해 주세요.",
        "en": "Please enter your birth date & time and your wedding date & time.",
    },
    "error_missing_spouse": {
        "ko": "배우자의 출생 날짜·시각을 입력해 주세요.",
        "en": "Please enter your spouse’s birth date & time.",
    },
    "error_malformed": {
        "ko": "날짜가 올바르지 않아요. 다시 확인해 주세요.",
        "en": "These dates don’t look right, please double-check.",
    },
    "error_out_of_range": {
        "ko": "계산 결과가 지원하는 달력 범위를 벗어나요.",
        "en": "That MarriedMore date falls outside the supported calendar.",
    },
    "error_order_basic": {
        "ko": "결혼일은 생년월일 이후여야 해요.",
        "en": "Your wedding date needs to be after your date of birth.",
    },
    "error_order_advanced": {
        "ko": "결혼 날짜·시각은 출생 날짜·시각 이후여야 해요.",
        "en": "Your wedding date & time needs to be after your date & time of birth.",
    },
    "error_order_spouse": {
        "ko": "결혼 날짜·시각은 배우자의 출생 날짜·시각 이후여야 해요.",
        "en": "Your wedding date & time needs to be after your spouse’s date & time of birth.",
    },
    "result_assume": {
        "ko": "이 날 결혼한다면, MarriedMore 날짜는…",
        "en": "Assuming you marry on this date, your MarriedMore day will be…",
    },
    "result_heading": {
        "ko": "나의 MarriedMore 날짜",
        "en": "Your MarriedMore date",
    },
    "result_age_on_day": {
        "ko": "이 날 <b>{age}세</b>가 돼요.",
        "en": "You’ll be <b>{age} years old</b> on this day.",
    },
    "result_days_ahead": {
        "ko": "<b>{days}일</b> 뒤에 이 날을 맞이해요.",
        "en": "You’ll reach this milestone in <b>{days} days</b>.",
    },
    "result_days_ago": {
        "ko": "<b>{days}일</b> 전에 이 날을 지났어요. 🎉",
        "en": "You reached this milestone <b>{days} days</b> ago. 🎉",
    },
    "label_you": {
        "ko": "나",
        "en": "You",
    },
    "label_spouse": {
        "ko": "배우자",
        "en": "Your spouse",
    },
    "result_age_you": {
        "ko": "<b>{age}세</b>가 돼요.",
        "en": "You’ll be <b>{age} years old</b>.",
    },
    "result_age_spouse": {
        "ko": "<b>{age}세</b>가 돼요.",
        "en": "They’ll be <b>{age} years old</b>.",
    },
    "result_span_ahead": {
        "ko": "<b>{days}일</b> <b>{hours}시간</b> 남았어요.",
        "en": "In <b>{days} days</b> and <b>{hours} hours</b>.",
    },
    "result_span_ago": {
        "ko": "<b>{days}일</b> <b>{hours}시간</b> 전이에요.",
        "en": "<b>{days} days</b> and <b>{hours} hours</b> ago.",
    },
    "result_both_past": {
        "ko": "두 사람 모두 MarriedMore를 지났어요. 계속 함께해요. 💍",
        "en": "You have both been MarriedMore—keep going. 💍",
    },
    "timeline_filename": {
        "ko": "결혼반환점.png",
        "en": "married-more.png",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
