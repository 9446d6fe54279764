"""QuizGen: build a random multiple-choice exam from the CSV bank and grade it."""
import logging
import sys
from pathlib import Path

# Ensure project root is in path
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from quizgen import config
from quizgen.engine import UNSTARTED, ExamSession
from quizgen.errors import EmptyInputError, SourceLoadError
from quizgen.loader import load_bank
from quizgen.scoring import is_correct, summarize

logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

WRONG_COLOR = "#ef4444"


@st.cache_resource
def get_bank(source: str):
    return load_bank(source)


st.set_page_config(page_title="QuizGen", layout="centered")
st.title("Exam Generator")

# Initialize session state
if "exam" not in st.session_state:
    st.session_state["exam"] = ExamSession.unstarted()
if "selected_categories" not in st.session_state:
    st.session_state["selected_categories"] = set()
if "per_category" not in st.session_state:
    st.session_state["per_category"] = config.QUESTIONS_PER_CATEGORY
if "exam_round" not in st.session_state:
    st.session_state["exam_round"] = 0  # part of widget keys so a new exam starts with blank radios

try:
    with st.spinner("Loading questions..."):
        bank = get_bank(config.CSV_SOURCE)
except (SourceLoadError, EmptyInputError) as e:
    st.error(f"Error: {e}")
    st.caption(f"Source tried: {config.CSV_SOURCE}")
    st.stop()

exam: ExamSession = st.session_state["exam"]

# ----- Setup -----
if exam.state == UNSTARTED:
    st.subheader("1. Select the chapters")
    selected = st.session_state["selected_categories"]
    cols = st.columns(4)
    for i, category in enumerate(bank.categories):
        with cols[i % 4]:
            is_selected = category in selected
            label = f"{category} ({bank.count(category)})"
            if st.button(label, key=f"cat_{category}", type="primary" if is_selected else "secondary", use_container_width=True):
                if is_selected:
                    selected.discard(category)
                else:
                    selected.add(category)
                st.rerun()

    st.subheader("2. Questions per chapter")
    col1, col2 = st.columns([1, 1])
    with col1:
        per_category = st.number_input("Questions per chapter", min_value=1, step=1, key="per_category", label_visibility="collapsed")
    with col2:
        if st.button("Generate", type="primary", disabled=not selected):
            st.session_state["exam"] = exam.generate(bank, selected, int(per_category))
            st.session_state["exam_round"] += 1
            if not st.session_state["exam"].questions:
                st.warning("The selected chapters have no questions.")
            else:
                st.rerun()
    st.stop()

# ----- Exam -----
round_id = st.session_state["exam_round"]
st.subheader(f"Generated exam ({len(exam)} questions)")
if st.button("Back to setup"):
    st.session_state["exam"] = exam.reset()
    st.rerun()

for idx, question in enumerate(exam.questions):
    outcome = is_correct(exam, idx) if exam.finished else None
    wrong = outcome is False
    with st.container(border=True):
        st.caption(question.category)
        title = f"{idx + 1}. {question.prompt}"
        if wrong:
            st.markdown(f"<span style='color:{WRONG_COLOR}'><b>{title}</b></span>", unsafe_allow_html=True)
        else:
            st.markdown(f"**{title}**")

        keys = list(question.option_keys())
        texts = {o.key: o.text for o in question.options}
        current = exam.answer_for(idx)
        choice = st.radio(
            "Choose one:",
            keys,
            index=keys.index(current) if current in keys else None,
            format_func=lambda k, texts=texts: f"{k}) {texts[k]}",
            key=f"q_{round_id}_{idx}",
            disabled=exam.finished,
            label_visibility="collapsed",
        )
        if choice is not None and choice != current:
            exam = exam.record_answer(idx, choice)

        if exam.finished and outcome is not None:
            if outcome:
                st.markdown(":green[**✓ Correct**]")
            else:
                st.markdown(":red[**✗ INCORRECT**]")

st.session_state["exam"] = exam

if not exam.finished:
    if st.button("Finish exam", type="primary", use_container_width=True):
        st.session_state["exam"] = exam.finish()
        st.rerun()
else:
    result = summarize(exam)
    with st.container(border=True):
        st.markdown("### Results")
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Correct", f"{result.correct} of {result.total_questions}")
        with col2:
            st.metric("Percentage", f"{result.percentage_display}%")
        with col3:
            st.metric("Unanswered", result.unanswered)
        if result.unanswered_questions:
            st.caption("Unanswered questions: " + ", ".join(str(n) for n in result.unanswered_questions))
        st.markdown("#### By chapter")
        st.table(result.breakdown_rows())
