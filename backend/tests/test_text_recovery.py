from tripwise.services.text_recovery import extract_fenced, recover_json, truncate_to_closer


def test_plain_json_object():
    result = recover_json('{"a": 1}', expect="object")
    assert result.ok
    assert result.value == {"a": 1}


def test_prose_wrapped_json_fence():
    text = 'Here is your plan:\n```json\n{"days": 3}\n```\nEnjoy!'
    result = recover_json(text, expect="object")
    assert result.ok
    assert result.value == {"days": 3}


def test_unlabeled_fence():
    result = recover_json("```\n[1, 2]\n```", expect="array")
    assert result.ok
    assert result.value == [1, 2]


def test_truncated_array_salvages_leading_elements():
    text = 'Sure! ```json\n[{"a":1},{"b":2}\n```'
    result = recover_json(text, expect="array")
    # Either a valid partial array or a clean failure, never an exception.
    if result.ok:
        assert isinstance(result.value, list)
    else:
        assert result.error


def test_truncated_array_cut_back_to_last_bracket():
    text = '[{"a":1},{"b":[1,2]},{"c":'
    result = recover_json(text, expect="array")
    # The last "]" closes the inner list, which leaves an unbalanced prefix.
    assert not result.ok


def test_truncated_object_cut_back_to_last_brace():
    assert truncate_to_closer('{"a":{"b":1}, "c": "d', "object") == '{"a":{"b":1}'


def test_shape_inferred_from_first_character():
    result = recover_json('[{"destination": "Paris"}] trailing words')
    assert result.ok
    assert result.value == [{"destination": "Paris"}]


def test_wrong_shape_is_a_failure():
    result = recover_json('{"a": 1}', expect="array")
    assert not result.ok


def test_empty_and_none_fail_cleanly():
    assert not recover_json("").ok
    assert not recover_json("   ").ok
    assert not recover_json(None).ok


def test_garbage_fails_cleanly():
    result = recover_json("I could not produce a plan today.", expect="object")
    assert not result.ok
    assert result.error


def test_extract_fenced_without_fence_returns_text():
    assert extract_fenced("no fences here") == "no fences here"


def test_unterminated_json_fence():
    assert extract_fenced('```json\n{"a": 1}').strip() == '{"a": 1}'
