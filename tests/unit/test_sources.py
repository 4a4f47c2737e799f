from switchboard.core.models import SourceSummary
from switchboard.status.sources import summarize_sources


def test_empty_is_unknown():
    assert summarize_sources([]) == SourceSummary(label="unknown", parts=[])


def test_counts_descending():
    result = summarize_sources(["env", "env", "file"])
    assert result.label == "env×2+file"
    assert result.parts == ["env", "file"]


def test_ties_keep_first_seen_order():
    assert summarize_sources(["keyring", "env", "config"]).label == "keyring+env+config"
    assert summarize_sources(["file", "env", "env", "file"]).label == "file×2+env×2"


def test_higher_count_moves_ahead():
    result = summarize_sources(["config", "env", "env"])
    assert result.label == "env×2+config"
    assert result.parts == ["env", "config"]


def test_blank_tags_are_unknown():
    result = summarize_sources([None, " ", "env"])
    assert result.label == "unknown×2+env"


def test_tags_are_trimmed():
    assert summarize_sources([" env", "env "]).label == "env×2"


def test_accepts_generator():
    assert summarize_sources(s for s in ["a"]).label == "a"
