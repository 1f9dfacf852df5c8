"""
講者報名系統主應用程式
Conference Speaker Registration
"""
import logging
import streamlit as st

from src.ui.speaker_form import render_speaker_form

logger = logging.getLogger(__name__)


# Streamlit 頁面配置
st.set_page_config(
    page_title="講者報名",
    page_icon="🎤",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def apply_custom_css():
    """套用自訂 CSS 樣式。"""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            border-radius: 12px;
        }
        </style>
    """, unsafe_allow_html=True)


def main():
    """主應用程式入口。"""
    try:
        apply_custom_css()
        render_speaker_form()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("應用程式發生錯誤，請重新整理頁面")
        st.code(str(e))


if __name__ == "__main__":
    main()
