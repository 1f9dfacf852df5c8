"""Call-for-papers form where speakers submit their profile and sessions."""
import logging
from typing import List

import streamlit as st

from src.models.browser import Browser
from src.models.session import Session
from src.models.speaker import Speaker
from src.services.registration_service import RegistrationResult, register_speaker
from src.services.rules_service import load_rules
from src.services.speaker_repository import JsonSpeakerRepository
from src.utils.exceptions import (
    InvalidArgumentError,
    MissingRequiredFieldError,
    NoSessionsApprovedError,
    SpeakerDoesNotMeetRequirementsError,
)
from src.utils.validation import validate_email

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "first_name": "名字",
    "last_name": "姓氏",
    "email": "Email",
}

BROWSER_CHOICES = ["Chrome", "Firefox", "Safari", "Edge", "Opera", "IE"]


def _parse_certifications(text: str) -> List[str]:
    """One certification per line; blank lines are dropped."""
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def _parse_sessions(text: str) -> List[Session]:
    """
    Parse session proposals, one per line, as ``title | description``.

    A line without ``|`` becomes a session whose description equals its title.
    """
    sessions = []
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        title, sep, description = line.partition("|")
        title = title.strip()
        description = description.strip() if sep else title
        sessions.append(Session(title=title, description=description))
    return sessions


def _result_message(result: RegistrationResult, speaker_name: str = "") -> str:
    """Translate a registration outcome into the message shown to the speaker."""
    if result.success:
        greeting = f"{speaker_name}，" if speaker_name else ""
        return f"{greeting}報名成功！您的講者編號為 {result.speaker_id}"

    error = result.error
    if isinstance(error, MissingRequiredFieldError):
        return f"請填寫{FIELD_LABELS.get(error.field, error.field)}"
    if isinstance(error, InvalidArgumentError):
        return "請至少提交一個議程"
    if isinstance(error, NoSessionsApprovedError):
        return "您提交的議程主題皆已過時，未能通過審核"
    if isinstance(error, SpeakerDoesNotMeetRequirementsError):
        return "很抱歉，您的資料未符合講者資格"
    return "發生未預期的錯誤"


def render_speaker_form():
    """Render the speaker submission form and handle submit."""
    st.markdown("<h2 style='color: #f8fafc;'>講者報名</h2>", unsafe_allow_html=True)

    with st.form("speaker_registration_form"):
        col1, col2 = st.columns(2)
        with col1:
            first_name = st.text_input("名字")
        with col2:
            last_name = st.text_input("姓氏")

        email = st.text_input("Email", placeholder="name@example.com")
        employer = st.text_input("任職公司")
        years_experience = st.number_input("年資", min_value=0, max_value=60, value=0, step=1)

        has_blog = st.checkbox("我有經營部落格")
        blog_url = st.text_input("部落格網址")

        certifications_text = st.text_area("專業認證（每行一項）")

        browser_col1, browser_col2 = st.columns(2)
        with browser_col1:
            browser_name = st.selectbox("使用的瀏覽器", BROWSER_CHOICES)
        with browser_col2:
            browser_version = st.number_input("瀏覽器主要版本", min_value=0, value=100, step=1)

        sessions_text = st.text_area(
            "議程提案",
            help="每行一個議程，格式：標題 | 描述"
        )

        submit = st.form_submit_button("🎤 送出報名", type="primary")

    if not submit:
        return

    if email and email.strip():
        is_valid, error_msg = validate_email(email)
        if not is_valid:
            st.error(f"❌ {error_msg}")
            return

    speaker = Speaker(
        first_name=first_name,
        last_name=last_name,
        email=email,
        employer=employer or None,
        years_experience=int(years_experience),
        has_blog=has_blog,
        blog_url=blog_url,
        certifications=_parse_certifications(certifications_text),
        browser=Browser(browser_name, int(browser_version)),
        sessions=_parse_sessions(sessions_text),
    )

    try:
        result = register_speaker(speaker, JsonSpeakerRepository(), load_rules())
    except Exception as e:
        logger.exception("Speaker registration failed")
        st.error("系統錯誤，請稍後再試")
        with st.expander("🔍 錯誤詳情"):
            st.code(str(e))
        return

    if result.success:
        st.success(f"✅ {_result_message(result, speaker.full_name)}")
        st.balloons()
    else:
        st.error(f"❌ {_result_message(result)}")
