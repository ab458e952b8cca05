from data.diff_engine import calculate_similarity, diff_engine


def test_identical_texts():
    assert calculate_similarity("hello", "hello") == 100
    assert calculate_similarity("a\nb\nc", "a\nb\nc") == 100


def test_empty_inputs():
    assert calculate_similarity("", "") == 100
    assert calculate_similarity("hello", "") == 0
    assert calculate_similarity("", "hello") == 0


def test_completely_different():
    assert calculate_similarity("abc", "xyz") == 0


def test_known_ratio():
    assert calculate_similarity("a\nb", "a\nc") == 50
    assert calculate_similarity("hello", "hello\nworld") == 67


def test_partial_similarity_is_bounded():
    score = calculate_similarity("hello\nworld", "hello\nearth")
    assert 0 < score < 100


def test_half_rounds_up():
    left = "\n".join(["same"] + [f"a{i}" for i in range(7)])
    right = "\n".join(["same"] + [f"b{i}" for i in range(7)])

    # 2 * 1 / 16 = 12.5 %
    assert calculate_similarity(left, right) == 13


def test_engine_options_apply_to_similarity():
    assert calculate_similarity("Hello", "hello") == 0
    assert diff_engine.similarity("Hello", "hello", {"ignoreCase": True}) == 100
