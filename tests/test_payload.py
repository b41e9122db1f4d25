import pytest

from wampkit.payload import InvocationPayload


def test_empty_payload_counts():
    payload = InvocationPayload()
    assert payload.number_of_arguments() == 0
    assert payload.number_of_kw_arguments() == 0
    assert payload.arguments() == []
    assert payload.kw_arguments() == {}


def test_default_uri_and_progress():
    payload = InvocationPayload()
    assert payload.uri() == ""
    assert payload.progressive_results_expected() is False


def test_positional_arguments():
    payload = InvocationPayload(arguments=[23, 777])
    assert payload.number_of_arguments() == 2
    assert payload.argument(0) == 23
    assert payload.argument(1) == 777
    assert payload.arguments() == [23, 777]


def test_argument_out_of_range():
    payload = InvocationPayload(arguments=[1])
    with pytest.raises(IndexError, match="no argument at index 1"):
        payload.argument(1)


def test_argument_negative_index_rejected():
    payload = InvocationPayload(arguments=[1])
    with pytest.raises(IndexError):
        payload.argument(-1)


def test_arguments_returns_copy():
    source = [1, 2]
    payload = InvocationPayload(arguments=source)
    copy = payload.arguments()
    copy.append(3)
    assert payload.number_of_arguments() == 2


def test_non_list_arguments_count_zero():
    payload = InvocationPayload(arguments="abc")
    assert payload.number_of_arguments() == 0
    with pytest.raises(IndexError):
        payload.argument(0)
    with pytest.raises(TypeError):
        payload.arguments()


def test_keyword_arguments():
    payload = InvocationPayload(kw_arguments={"id": "abc", "n": 5})
    assert payload.number_of_kw_arguments() == 2
    assert payload.kw_argument("id") == "abc"
    assert payload.kw_argument_or("n", 0) == 5
    assert payload.kw_argument_or("missing", "fb") == "fb"
    assert payload.kw_arguments() == {"id": "abc", "n": 5}


def test_missing_keyword_argument():
    payload = InvocationPayload(kw_arguments={"id": 1})
    with pytest.raises(KeyError, match="name keyword argument doesn't exist"):
        payload.kw_argument("name")


def test_non_map_kw_arguments():
    payload = InvocationPayload(kw_arguments=[1, 2])
    assert payload.number_of_kw_arguments() == 0
    with pytest.raises(TypeError):
        payload.kw_argument("x")
    with pytest.raises(TypeError):
        payload.kw_argument_or("x", 1)
    with pytest.raises(TypeError):
        payload.kw_arguments()


def test_details_unset_raise_type_error():
    payload = InvocationPayload()
    with pytest.raises(TypeError):
        payload.detail("caller")
    with pytest.raises(TypeError):
        payload.detail_or("caller", None)
    with pytest.raises(TypeError):
        payload.details()


def test_set_details_reads_procedure_and_progress():
    payload = InvocationPayload()
    payload.set_details({"procedure": "com.myapp.longop", "receive_progress": True})
    assert payload.uri() == "com.myapp.longop"
    assert payload.progressive_results_expected() is True


def test_details_lookup():
    details = {"caller_authid": "alice", "procedure": "com.examples.calculator.add2"}
    payload = InvocationPayload(details=details)
    assert payload.detail("caller_authid") == "alice"
    assert payload.detail_or("caller_authid", "") == "alice"
    assert payload.detail_or("caller", 7) == 7
    assert payload.details() == details
    assert payload.uri() == "com.examples.calculator.add2"
    assert payload.progressive_results_expected() is False


def test_missing_detail():
    payload = InvocationPayload(details={})
    with pytest.raises(KeyError, match="caller_authid call detail doesn't exist"):
        payload.detail("caller_authid")


def test_set_details_rejects_non_map():
    payload = InvocationPayload()
    with pytest.raises(TypeError):
        payload.set_details([("procedure", "x")])
    assert payload.uri() == ""


def test_set_details_rejects_bad_progress_type():
    payload = InvocationPayload()
    with pytest.raises(TypeError):
        payload.set_details({"receive_progress": "yes"})
    assert payload.progressive_results_expected() is False


def test_set_details_rejects_bad_procedure_type():
    payload = InvocationPayload()
    with pytest.raises(TypeError):
        payload.set_details({"procedure": 5})