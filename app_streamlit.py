import logging

import requests
import streamlit as st

from client import AssistantError, ask, recent_history
from config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger("assistant.frontend")

st.set_page_config(page_title="Virtual Health Assistant", page_icon="🩺", layout="centered")

st.title("🩺 Virtual Health Assistant")
st.info("This tool is for educational purposes only. It does not provide medical advice.")

question = st.text_area("Ask a health question:", placeholder="e.g. What should I do about my symptoms?")

if st.button("Ask"):
    if not question.strip():
        st.warning("Please enter a question first.")
    else:
        try:
            answer = ask(question, settings.api_url)
        except AssistantError as e:
            st.error(e.message)
        except requests.RequestException as e:
            logger.warning("Backend unreachable: %s", e)
            st.error(f"Could not reach the assistant at {settings.api_url}.")
        else:
            st.subheader("💬 Answer")
            st.write(answer)

st.sidebar.header("📊 Recent Questions")
try:
    df = recent_history(settings.api_url)
except (AssistantError, requests.RequestException) as e:
    logger.warning("History unavailable: %s", e)
    st.sidebar.info("History unavailable.")
else:
    if df.empty:
        st.sidebar.info("No history yet.")
    else:
        st.sidebar.dataframe(df)
