"""Tests for the Resolver (shape inference only, no text)."""

from json_to_nest.options import Mode, RenderOptions
from json_to_nest.resolver import Resolver
from json_to_nest.typedef import ArrayOf, Declaration, Reference, Scalar, element_reference


def _dto() -> Resolver:
    return Resolver(RenderOptions(mode=Mode.DTO))


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

def test_root_name():
    assert Resolver().resolve_document({}).name == "Parent"
    assert _dto().resolve_document({}).name == "ParentDto"

def test_root_members_in_order():
    root = Resolver().resolve_document({"id": 1, "name": "x", "ok": True})
    assert [m.name for m in root.members] == ["id", "name", "ok"]
    assert [m.type for m in root.members] == [
        Scalar("number"), Scalar("string"), Scalar("boolean"),
    ]
    assert root.children == []

def test_root_scalar_alias():
    root = Resolver().resolve_document(42)
    assert root.alias == Scalar("number")
    assert root.members == []


# ---------------------------------------------------------------------------
# Nested objects and arrays
# ---------------------------------------------------------------------------

def test_nested_object_declared_on_owner():
    root = Resolver().resolve_document({"user_info": {"age": 3}})
    assert root.members[0].type == Reference("UserInfo")
    (child,) = root.children
    assert child.name == "UserInfo"
    assert child.members[0].type == Scalar("number")

def test_deep_nesting_and_walk_order():
    root = Resolver().resolve_document({"a": {"b": {"x": 1}}, "c": {"y": 1}})
    assert [d.name for d in root.walk()] == ["B", "A", "C"]

def test_array_uses_first_element():
    root = Resolver().resolve_document({"items": [{"id": 1}, {"other": "x"}]})
    assert root.members[0].type == ArrayOf(Reference("Items"))
    (child,) = root.children
    assert [m.name for m in child.members] == ["id"]

def test_empty_array():
    root = Resolver().resolve_document({"tags": []})
    assert root.members[0].type == ArrayOf(None)

def test_array_of_arrays():
    root = Resolver().resolve_document({"grid": [[{"v": 1}]]})
    ref = root.members[0].type
    assert ref == ArrayOf(ArrayOf(Reference("Grid")))
    assert element_reference(ref) == Reference("Grid")

def test_array_suffix_is_per_occurrence():
    root = Resolver().resolve_document({"a": [{"x": 1}], "b": {"a": {"y": 1}}})
    b = root.children[1]
    assert b.members[0].type == Reference("A")

def test_unknown_value():
    assert Resolver().resolve(object(), "f", Declaration("X")) == Scalar("unknown")


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------

def test_identical_shape_under_other_field_reused():
    root = Resolver().resolve_document({"a": {"x": 1, "y": 2}, "b": {"y": 3, "x": 4}})
    assert [m.type for m in root.members] == [Reference("A"), Reference("A")]
    assert [d.name for d in root.children] == ["A"]

def test_third_shape_compared_with_second_only():
    root = Resolver().resolve_document({
        "p": {"addr": {"x": 1}},
        "q": {"addr": {"y": 1}, "n": 1},
        "r": {"addr": {"x": 2}, "m": 1},
    })
    addrs = [d for d in root.walk() if d.name == "Addr"]
    assert [[m.name for m in d.members] for d in addrs] == [["x"], ["y"], ["x"]]

def test_resolvers_do_not_share_state():
    first = Resolver()
    first.resolve_document({"a": {"x": 1}})
    second = Resolver()
    root = second.resolve_document({"b": {"x": 1}})
    assert root.members[0].type == Reference("B")


# ---------------------------------------------------------------------------
# Annotations
# ---------------------------------------------------------------------------

def test_interface_has_no_annotations():
    root = Resolver().resolve_document({"a": 1, "b": {"c": "x"}})
    assert all(m.annotations == [] for m in root.members)

def test_dto_scalar_annotations():
    root = _dto().resolve_document({
        "s": "text",
        "d": "2020-02-02T10:00:00+01:00",
        "n": 1.5,
        "b": False,
        "z": None,
    })
    assert [m.annotations for m in root.members] == [
        ["@IsString()", "@IsNotEmpty()"],
        ["@IsDateString()"],
        ["@IsNumber()"],
        ["@IsBoolean()"],
        [],
    ]

def test_dto_object_annotations():
    root = _dto().resolve_document({"owner": {"id": 1}})
    assert root.members[0].annotations == ["@ValidateNested()", "@Type(() => OwnerDto)"]

def test_dto_array_annotations():
    root = _dto().resolve_document({"items": [{"id": 1}], "tags": ["a"], "none": []})
    assert [m.annotations for m in root.members] == [
        ["@IsArray()", "@ValidateNested({ each: true })", "@Type(() => ItemsDto)"],
        ["@IsArray()"],
        ["@IsArray()"],
    ]
