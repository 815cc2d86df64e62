import pytest

from abitypes.filter import RawTopicFilter, Topic, TopicFilter, TopicUnavailableError


def _hash(text):
    return bytes.fromhex(text)


def test_topic_filter_serialization():
    expected = (
        '["0x000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b",null,'
        '["0x000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b",'
        '"0x0000000000000000000000000aff3454fce5edbc8cca8697c15331677e6ebccc"],null]'
    )
    topic = TopicFilter(
        topic0=Topic.this(_hash("000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b")),
        topic1=Topic.any(),
        topic2=Topic.one_of(
            [
                _hash("000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b"),
                _hash("0000000000000000000000000aff3454fce5edbc8cca8697c15331677e6ebccc"),
            ]
        ),
        topic3=Topic.any(),
    )
    assert topic.to_json() == expected


def test_topic_from():
    assert Topic.from_value(None) == Topic.any()
    assert Topic.from_value(10) == Topic.this(10)
    assert Topic.from_value([10, 20]) == Topic.one_of([10, 20])


def test_topic_into_vec():
    assert Topic.any().to_list() == []
    assert Topic.this(10).to_list() == [10]
    assert Topic.one_of([10, 20]).to_list() == [10, 20]


def test_topic_is_any():
    assert Topic.any().is_any()
    assert not Topic.one_of([10, 20]).is_any()
    assert not Topic.this(10).is_any()


def test_topic_index():
    assert Topic.one_of([10, 20])[0] == 10
    assert Topic.one_of([10, 20])[1] == 20
    assert Topic.this(10)[0] == 10


def test_topic_index_any_raises():
    with pytest.raises(TopicUnavailableError, match="Topic unavailable"):
        Topic.any()[0]


def test_topic_index_this_raises():
    with pytest.raises(TopicUnavailableError, match="Topic unavailable"):
        Topic.this(10)[1]


def test_topic_map():
    assert Topic.one_of([1, 2]).map(lambda v: v * 10) == Topic.one_of([10, 20])
    assert Topic.this(3).map(str) == Topic.this("3")
    assert Topic.any().map(str) == Topic.any()


def test_default_filters_match_anything():
    assert TopicFilter().to_json_value() == [None, None, None, None]
    raw = RawTopicFilter()
    assert raw.topic0.is_any() and raw.topic1.is_any() and raw.topic2.is_any()


def test_bad_hash_length():
    with pytest.raises(ValueError):
        Topic.this(b"\x00" * 20).to_json_value()