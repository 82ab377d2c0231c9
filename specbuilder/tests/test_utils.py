from specbuilder.core.env import filter_user_defined_env
from specbuilder.core.utils import (
    lowercase_object_key,
    remove_empty_attributes,
    uppercase_object_key,
)


def test_uppercase_object_key_recurses():
    vpc = {"vpcId": "vpc-1", "vSwitchIds": ["vsw-1"], "nested": [{"securityGroupId": "sg"}]}

    assert uppercase_object_key(vpc) == {
        "VpcId": "vpc-1",
        "VSwitchIds": ["vsw-1"],
        "Nested": [{"SecurityGroupId": "sg"}],
    }


def test_lowercase_object_key_recurses():
    assert lowercase_object_key({"Project": "p", "LogStore": {"Name": "x"}}) == {
        "project": "p",
        "logStore": {"name": "x"},
    }


def test_key_conversion_leaves_scalars_and_none():
    assert uppercase_object_key(None) is None
    assert uppercase_object_key("AliyunOSSFullAccess") == "AliyunOSSFullAccess"
    assert uppercase_object_key(["AliyunOSSFullAccess"]) == ["AliyunOSSFullAccess"]


def test_remove_empty_attributes():
    tree = {
        "a": None,
        "b": {},
        "c": [],
        "d": {"e": None, "f": {"g": []}},
        "h": [None, {}, 1],
        "keep_false": False,
        "keep_zero": 0,
        "keep_string": "",
        "keep": {"x": 1},
    }

    assert remove_empty_attributes(tree) == {
        "h": [1],
        "keep_false": False,
        "keep_zero": 0,
        "keep_string": "",
        "keep": {"x": 1},
    }


def test_remove_empty_attributes_keeps_key_order():
    tree = {"z": 1, "y": None, "x": 2, "w": {"v": 3}}

    assert list(remove_empty_attributes(tree)) == ["z", "x", "w"]


def test_remove_empty_attributes_does_not_mutate_input():
    tree = {"a": None, "b": {"c": {}}}
    remove_empty_attributes(tree)

    assert tree == {"a": None, "b": {"c": {}}}


class TestFilterUserDefinedEnv:
    def test_prefix_is_stripped(self):
        environ = {"UDEV_NODE_ENV": "production", "PATH": "/usr/bin", "UDEV_API_KEY": "k"}

        assert filter_user_defined_env(environ) == {"NODE_ENV": "production", "API_KEY": "k"}

    def test_bare_prefix_is_ignored(self):
        assert filter_user_defined_env({"UDEV_": "x"}) == {}

    def test_custom_prefix(self):
        assert filter_user_defined_env({"FC_A": "1", "UDEV_B": "2"}, prefix="FC_") == {"A": "1"}

    def test_empty_prefix_selects_nothing(self):
        assert filter_user_defined_env({"A": "1"}, prefix="") == {}
