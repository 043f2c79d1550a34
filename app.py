import logging
import time

import streamlit as st

from plagiarism_checker.config import APP_CONFIG
from plagiarism_checker.core.comparator import PlagiarismChecker
from plagiarism_checker.core.logging_config import setup_logging
from plagiarism_checker.core.models import Algorithm
from plagiarism_checker.core.validation import ValidationError, ParameterValidator
from plagiarism_checker.utils.highlighting import highlight_html, spans_in_original, severity_badge_html
from plagiarism_checker.utils.report import matches_table
from plagiarism_checker.utils.text_loader import decode_uploaded_text

# Configure production logging
setup_logging(
    log_level=APP_CONFIG['log_level'],
    log_dir=APP_CONFIG['log_dir'],
    structured_logging=APP_CONFIG['structured_logging'],
    enable_console=True,
    enable_file=True
)

logger = logging.getLogger(__name__)

DOCUMENTS = {
    "text_a": "Document 1",
    "text_b": "Document 2",
}


def initialize_session_state():
    """Initialize all session state variables."""
    for key in DOCUMENTS:
        if key not in st.session_state:
            st.session_state[key] = ""
    if "comparison_result" not in st.session_state:
        st.session_state.comparison_result = None
    if "compared_texts" not in st.session_state:
        st.session_state.compared_texts = None
    if "process_time_ms" not in st.session_state:
        st.session_state.process_time_ms = 0.0


def initialize_app():
    """Setup the Streamlit app configuration and styling."""
    st.set_page_config(
        page_title="Plagiarism Checker",
        page_icon="🔍",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    initialize_session_state()

    st.markdown("""
    <style>
    .main-header {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        padding: 2rem;
        border-radius: 16px;
        text-align: center;
        color: #ffffff;
        margin-bottom: 1.5rem;
    }
    .metric-card {
        background: #ffffff;
        border-radius: 12px;
        padding: 1rem 1.5rem;
        box-shadow: 0 4px 12px rgba(0,0,0,0.1);
        margin-bottom: 1rem;
    }
    .match-card {
        background: #f8fafc;
        border-radius: 8px;
        padding: 0.6rem 0.8rem;
        margin-bottom: 0.5rem;
    }
    .document-view {
        border: 1px solid #e2e8f0;
        border-radius: 8px;
        padding: 1rem;
        white-space: pre-wrap;
        font-size: 0.9rem;
        max-height: 500px;
        overflow-y: auto;
    }
    mark.match-highlight {
        background: #fef08a;
        border-radius: 3px;
        padding: 0 1px;
    }
    </style>
    """, unsafe_allow_html=True)


def load_uploaded_document(key: str):
    """Uploader callback: replace the document text with the uploaded file."""
    uploaded = st.session_state.get(f"{key}_upload")
    if uploaded is None:
        return
    try:
        st.session_state[key] = decode_uploaded_text(
            uploaded.getvalue(), uploaded.name, max_size_mb=APP_CONFIG['max_upload_mb']
        )
        logger.info(f"Loaded {uploaded.name} into {DOCUMENTS[key]}", extra={'file_path': uploaded.name})
    except ValidationError as e:
        st.session_state[f"{key}_error"] = e.message
        logger.warning(f"Rejected upload {uploaded.name}: {e.message}")


def clear_document(key: str):
    st.session_state[key] = ""


def document_input(key: str):
    """Text area with upload and clear controls for one document."""
    label = DOCUMENTS[key]
    st.text_area(
        label,
        key=key,
        height=250,
        placeholder=f"Paste or type the {'first' if key == 'text_a' else 'second'} document here",
    )

    col1, col2 = st.columns([4, 1])
    with col1:
        st.file_uploader(
            f"Upload {label}",
            type=["txt"],
            key=f"{key}_upload",
            on_change=load_uploaded_document,
            args=(key,),
            label_visibility="collapsed",
        )
    with col2:
        st.button("Clear", key=f"{key}_clear", on_click=clear_document, args=(key,))

    error = st.session_state.pop(f"{key}_error", None)
    if error:
        st.error(f"❌ {error}")


def run_comparison(text_a: str, text_b: str, algorithm: Algorithm, min_match_length: int):
    """Run the comparison and store the outcome in session state."""
    try:
        ParameterValidator.validate_text(text_a, DOCUMENTS["text_a"], max_length=APP_CONFIG['max_input_chars'])
        ParameterValidator.validate_text(text_b, DOCUMENTS["text_b"], max_length=APP_CONFIG['max_input_chars'])
        checker = PlagiarismChecker(
            min_match_length=min_match_length,
            algorithm=algorithm,
            max_workers=APP_CONFIG['max_workers'],
        )
    except ValidationError as e:
        st.error(f"❌ Invalid input: {e.message}")
        logger.error(f"Input validation failed: {e.message}")
        return

    with st.spinner("Comparing documents..."):
        start_time = time.perf_counter()
        try:
            result = checker.compare(text_a, text_b)
        except Exception as e:
            st.error(f"❌ Comparison failed: {str(e)}")
            return
        elapsed_ms = (time.perf_counter() - start_time) * 1000

    st.session_state.comparison_result = result
    st.session_state.compared_texts = (text_a, text_b)
    st.session_state.process_time_ms = elapsed_ms


def display_results(result, text_a: str, text_b: str, process_time_ms: float):
    """Display the similarity score, matched segments and highlighted documents."""
    st.markdown("## 📊 Plagiarism Analysis Results")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown(f"""
        <div class="metric-card">
            <h3 style="color: #3b82f6;">{result.similarity_score:.2f}%</h3>
            <p>Similarity Score {severity_badge_html(result.similarity_score)}</p>
        </div>
        """, unsafe_allow_html=True)
    with col2:
        st.markdown(f"""
        <div class="metric-card">
            <h3 style="color: #8b5cf6;">{len(result.matches)}</h3>
            <p>Matching Segments</p>
        </div>
        """, unsafe_allow_html=True)
    with col3:
        st.markdown(f"""
        <div class="metric-card">
            <h3 style="color: #06b6d4;">{process_time_ms:.2f}ms</h3>
            <p>Using {result.algorithm.label}</p>
        </div>
        """, unsafe_allow_html=True)

    st.progress(min(result.similarity_score, 100.0) / 100)

    st.markdown(f"### Found {len(result.matches)} matching segments")
    if result.matches:
        with st.expander("📝 Matched segments", expanded=True):
            for index, match in enumerate(result.matches, 1):
                st.markdown(f"""
                <div class="match-card">
                    <strong>Match #{index}</strong> ({match.length} characters)<br>
                    {highlight_html(match.text, [(0, match.length)])}
                </div>
                """, unsafe_allow_html=True)
        st.dataframe(matches_table(result), use_container_width=True, hide_index=True)
    else:
        st.success("✅ No shared segments of the minimum length were found.")

    tab1, tab2 = st.tabs(["Document 1", "Document 2"])
    with tab1:
        spans = spans_in_original(text_a, result.spans_a())
        st.markdown(f'<div class="document-view">{highlight_html(text_a, spans)}</div>', unsafe_allow_html=True)
    with tab2:
        spans = spans_in_original(text_b, result.spans_b())
        st.markdown(f'<div class="document-view">{highlight_html(text_b, spans)}</div>', unsafe_allow_html=True)


def display_algorithm_explanation():
    """Explain the two matching strategies."""
    st.markdown("## String Matching Algorithms")
    st.caption("Learn about the algorithms used in this plagiarism checker")

    with st.expander("Rabin-Karp Algorithm (Hashing)", expanded=True):
        st.markdown("""
The Rabin-Karp algorithm is a string-searching algorithm that uses hashing to find patterns in strings.

**How it works:**
1. Calculate a hash value for every substring of the first document with the current window length
2. Calculate hash values for all substrings of the second document with the same length
3. Compare the hash values - if they match, compare the actual substrings
4. Use a rolling hash function to update each hash in constant time as the window slides

**Time Complexity:**
- Average case: O(n + m) per window length
- Worst case: O(n*m) - occurs when there are many hash collisions
        """)

    with st.expander("KMP (Knuth-Morris-Pratt) Algorithm"):
        st.markdown("""
The KMP algorithm is an efficient string-matching algorithm that uses information about the pattern itself
to minimize comparisons.

**How it works:**
1. Preprocess the pattern to build a "partial match" table (also called "failure function")
2. Use this table to skip characters that we know will not match
3. Avoid backtracking in the main text, making each search linear

**Time Complexity:**
- Preprocessing: O(m) for a pattern of length m
- Searching: O(n) for a text of length n

Here every window of the first document is used as a pattern, so the overall search is much more
exhaustive than Rabin-Karp.
        """)

    with st.expander("How the similarity score is calculated"):
        st.markdown("""
Both documents are lowercased and line breaks become spaces. Matches of at least the minimum length are
collected, overlapping matches are removed keeping the longest ones first, and the score is the number of
matched characters divided by the length of the shorter document.

- **Low**: below 20%
- **Medium**: 20% to 50%
- **High**: 50% and above
        """)


def main():
    """Main application function."""
    initialize_app()

    st.markdown("""
    <div class="main-header">
        <h1>🔍 Plagiarism Checker</h1>
        <p>Compare two texts to find similarities using string matching algorithms</p>
    </div>
    """, unsafe_allow_html=True)

    input_tab, about_tab = st.tabs(["Text Input", "About Algorithms"])

    with input_tab:
        col1, col2 = st.columns(2)
        with col1:
            document_input("text_a")
        with col2:
            document_input("text_b")

        col1, col2 = st.columns(2)
        with col1:
            algorithm = st.radio(
                "Algorithm Selection",
                options=list(Algorithm),
                format_func=lambda option: option.label,
            )
        with col2:
            min_match_length = st.slider(
                "Minimum match length",
                min_value=1,
                max_value=50,
                value=min(max(APP_CONFIG['min_match_length'], 1), 50),
            )

        text_a = st.session_state.text_a
        text_b = st.session_state.text_b
        if st.button("Compare Documents", type="primary", use_container_width=True,
                     disabled=not text_a or not text_b):
            run_comparison(text_a, text_b, algorithm, min_match_length)

        if st.session_state.comparison_result is not None:
            compared_a, compared_b = st.session_state.compared_texts
            display_results(
                st.session_state.comparison_result,
                compared_a,
                compared_b,
                st.session_state.process_time_ms,
            )

    with about_tab:
        display_algorithm_explanation()


if __name__ == "__main__":
    main()
