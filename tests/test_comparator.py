import pytest

from plagiarism_checker import Algorithm, PlagiarismChecker, compare
from plagiarism_checker.core import comparator
from plagiarism_checker.core.models import ComparisonResult
from plagiarism_checker.core.normalizer import normalize
from plagiarism_checker.core.validation import ParameterValidationError

ALGORITHMS = [Algorithm.HASHING, Algorithm.AUTOMATON]

DOCUMENT_PAIRS = [
    ("The cat sat on the mat", "A dog sat on the mat today"),
    ("To be, or not to be: that is the question.", "That is the question; to be or not to be."),
    ("abcabcabcabc", "cabcabcab"),
    ("Line one\nLine two\r\nLine three", "line two LINE THREE line one"),
    ("aaaaaaaaaa", "aaaaa"),
]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_case_insensitive_full_match(algorithm):
    result = compare("Hello World", "hello world", algorithm, 5)

    assert len(result.matches) == 1
    match = result.matches[0]
    assert match.text == "hello world"
    assert match.span_a == (0, 11)
    assert match.span_b == (0, 11)
    assert result.similarity_score == pytest.approx(100.0)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_no_match_below_threshold(algorithm):
    result = compare("abc", "xyz", algorithm, 5)

    assert result.matches == []
    assert result.similarity_score == 0.0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_identical_documents_give_one_full_match(algorithm):
    text = "The quick brown fox jumps over the lazy dog."
    result = compare(text, text, algorithm, 5)

    assert len(result.matches) == 1
    assert result.matches[0].text == normalize(text)
    assert result.matches[0].span_a == (0, len(text))
    assert result.similarity_score == pytest.approx(100.0)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_empty_documents(algorithm):
    assert compare("", "", algorithm).matches == []
    assert compare("", "", algorithm).similarity_score == 0.0
    assert compare("", "something long enough", algorithm).similarity_score == 0.0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("text_a, text_b", DOCUMENT_PAIRS)
def test_result_invariants(algorithm, text_a, text_b):
    min_length = 4
    result = compare(text_a, text_b, algorithm, min_length)
    norm_a, norm_b = normalize(text_a), normalize(text_b)

    for i, first in enumerate(result.matches):
        # substring fidelity and minimum length
        assert first.text == norm_a[first.start_a:first.end_a] == norm_b[first.start_b:first.end_b]
        assert first.length >= min_length
        # disjointness on both documents
        for second in result.matches[i + 1:]:
            assert not (first.start_a < second.end_a and second.start_a < first.end_a)
            assert not (first.start_b < second.end_b and second.start_b < first.end_b)

    assert 0.0 <= result.similarity_score <= 100.0
    lengths = [m.length for m in result.matches]
    assert lengths == sorted(lengths, reverse=True)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_swapping_documents_swaps_spans(algorithm):
    text_a = "The cat sat on the mat"
    text_b = "A dog sat on the mat today"

    forward = compare(text_a, text_b, algorithm)
    backward = compare(text_b, text_a, algorithm)

    assert sorted(m.text for m in forward.matches) == sorted(m.text for m in backward.matches)
    assert sorted((m.span_b, m.span_a) for m in forward.matches) == \
        sorted((m.span_a, m.span_b) for m in backward.matches)


def test_strategies_agree_on_unique_cover():
    text_a = "The cat sat on the mat"
    text_b = "A dog sat on the mat today"

    hashing = compare(text_a, text_b, Algorithm.HASHING)
    automaton = compare(text_a, text_b, Algorithm.AUTOMATON)

    assert [m.text for m in hashing.matches] == [" sat on the mat"]
    assert [m.text for m in automaton.matches] == [" sat on the mat"]
    assert hashing.similarity_score == pytest.approx(15 / 22 * 100)
    assert automaton.similarity_score == pytest.approx(hashing.similarity_score)


def test_strategies_break_ties_in_discovery_order():
    text_a = "xxxxx yyyyy"
    text_b = "yyyyy xxxxx"

    hashing = compare(text_a, text_b, Algorithm.HASHING)
    automaton = compare(text_a, text_b, Algorithm.AUTOMATON)

    assert [m.text for m in hashing.matches] == ["yyyyy", "xxxxx"]
    assert [m.text for m in automaton.matches] == ["xxxxx", "yyyyy"]
    assert hashing.similarity_score == pytest.approx(10 / 11 * 100)


def test_line_breaks_are_flattened():
    result = compare("First line\nsecond line", "FIRST LINE SECOND LINE", Algorithm.HASHING)

    assert len(result.matches) == 1
    assert result.similarity_score == pytest.approx(100.0)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_parallel_search_gives_identical_result(algorithm):
    text_a = "To be, or not to be: that is the question."
    text_b = "That is the question; to be or not to be."

    sequential = compare(text_a, text_b, algorithm, 4)
    parallel = compare(text_a, text_b, algorithm, 4, max_workers=4)

    assert parallel.matches == sequential.matches
    assert parallel.similarity_score == sequential.similarity_score


@pytest.mark.parametrize("min_length", [0, -1, True, 2.5, "five", None])
def test_invalid_min_match_length(min_length):
    with pytest.raises(ParameterValidationError):
        compare("hello world", "hello world", Algorithm.HASHING, min_length)


@pytest.mark.parametrize("text_a, text_b", [(None, "abc"), (b"abc", "abc"), ("abc", 123)])
def test_non_text_documents_are_rejected(text_a, text_b):
    with pytest.raises(ParameterValidationError) as excinfo:
        compare(text_a, text_b)
    assert isinstance(excinfo.value, ValueError)


def test_unknown_algorithm_is_rejected():
    with pytest.raises(ParameterValidationError):
        compare("hello world", "hello world", "boyer-moore")


@pytest.mark.parametrize("value, expected", [
    ("rabin-karp", Algorithm.HASHING),
    ("HASHING", Algorithm.HASHING),
    ("kmp", Algorithm.AUTOMATON),
    ("automaton", Algorithm.AUTOMATON),
    (Algorithm.AUTOMATON, Algorithm.AUTOMATON),
])
def test_algorithm_selector_values(value, expected):
    assert Algorithm.from_value(value) is expected
    assert compare("Hello World", "hello world", value).algorithm is expected


def test_checker_reuses_settings_and_keeps_no_state():
    checker = PlagiarismChecker(min_match_length=3, algorithm="kmp")

    first = checker.compare("abcdef", "xxabcxx")
    second = checker.compare("abcdef", "xxabcxx", algorithm=Algorithm.HASHING)

    assert isinstance(first, ComparisonResult)
    assert [m.text for m in first.matches] == ["abc"]
    assert first.matches == second.matches
    assert first.algorithm is Algorithm.AUTOMATON
    assert second.algorithm is Algorithm.HASHING
    assert first.min_match_length == 3


def test_result_helpers():
    result = compare("xxxxx yyyyy", "yyyyy xxxxx", Algorithm.HASHING)

    assert result.spans_a() == [(0, 5), (6, 11)]
    assert result.spans_b() == [(0, 5), (6, 11)]
    assert result.matched_characters == 10
    assert result.severity == "High"
    assert result.normalized_a == "xxxxx yyyyy"
    assert result.metadata['candidates'] == 2

    payload = result.to_dict()
    assert payload['algorithm'] == "rabin-karp"
    assert payload['matches'][0] == {
        'text': "yyyyy", 'length': 5, 'start_a': 6, 'end_a': 11, 'start_b': 0, 'end_b': 5,
    }


def test_match_swapped():
    match = compare("abcdefgh", "zzabcdefgh", Algorithm.HASHING).matches[0]
    assert match.swapped().span_a == match.span_b
    assert match.swapped().span_b == match.span_a


def test_unexpected_matcher_failure_is_logged_and_raised(monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise RuntimeError("matcher exploded")

    monkeypatch.setitem(comparator.MATCHERS, Algorithm.HASHING, broken)

    with pytest.raises(RuntimeError):
        compare("hello world", "hello world", Algorithm.HASHING)

    assert "Unhandled exception in compare: matcher exploded" in caplog.text


def test_validation_errors_are_not_logged_as_unhandled(caplog):
    with pytest.raises(ParameterValidationError):
        compare(None, "hello world")

    assert "Unhandled exception" not in caplog.text
