from __future__ import annotations

import copy

from pytest import raises

from tfaddress._address import Address, Module, ModulePath, ResourceMode, ResourceSpec
from tfaddress._index import ABSENT, IntegerIndex, TextIndex


def test__Module__render() -> None:
    assert Module("foo").render() == "module.foo"
    assert Module("foo", IntegerIndex(2)).render() == "module.foo[2]"
    assert str(Module("foo", TextIndex("a b"))) == 'module.foo["a b"]'


def test__ModulePath__render() -> None:
    assert ModulePath().render() == ""
    assert ModulePath([Module("a")]).render() == "module.a"
    assert str(ModulePath([Module("a", IntegerIndex(0)), Module("b")])) == "module.a[0].module.b"


def test__ModulePath__copy_is_independent() -> None:
    path = ModulePath([Module("a")])
    other = path.copy()
    assert isinstance(other, ModulePath)
    assert other == path
    other.append(Module("b"))
    assert path == ModulePath([Module("a")])


def test__ResourceSpec__render() -> None:
    assert ResourceSpec("aws_instance", "web").render() == "aws_instance.web"
    assert ResourceSpec("aws_instance", "web", IntegerIndex(-1)).render() == "aws_instance.web[-1]"
    assert str(ResourceSpec("aws_instance", "web", TextIndex('"'))) == 'aws_instance.web["\\""]'


def test__Address__render() -> None:
    spec = ResourceSpec("aws_ami", "ubuntu")
    assert Address([], spec).render() == "aws_ami.ubuntu"
    assert Address([], spec, ResourceMode.DATA).render() == "data.aws_ami.ubuntu"
    assert Address([Module("a"), Module("b", TextIndex("x"))], spec).render() == 'module.a.module.b["x"].aws_ami.ubuntu'
    assert str(Address([Module("a")], spec, ResourceMode.DATA)) == "module.a.data.aws_ami.ubuntu"


def test__Address__converts_module_path_and_mode() -> None:
    address = Address([Module("a")], ResourceSpec("t", "n"), "data")  # type: ignore[arg-type]
    assert isinstance(address.module_path, ModulePath)
    assert address.mode is ResourceMode.DATA
    assert address.is_data()
    assert Address([], ResourceSpec("t", "n")).mode is ResourceMode.MANAGED


def test__Address__rejects_unknown_mode() -> None:
    with raises(ValueError):
        Address([], ResourceSpec("t", "n"), "import")  # type: ignore[arg-type]


def test__Address__is_immutable() -> None:
    address = Address([], ResourceSpec("t", "n"))
    with raises(AttributeError):
        address.mode = ResourceMode.DATA  # type: ignore[misc]


def test__Address__equality_and_hash() -> None:
    a1 = Address([Module("a")], ResourceSpec("t", "n", IntegerIndex(1)))
    a2 = Address(ModulePath([Module("a")]), ResourceSpec("t", "n", IntegerIndex(1)))
    assert a1 == a2
    assert hash(a1) == hash(a2)
    assert len({a1, a2}) == 1
    assert a1 != Address([Module("a")], ResourceSpec("t", "n", IntegerIndex(1)), ResourceMode.DATA)
    assert a1 != Address([], ResourceSpec("t", "n", IntegerIndex(1)))


def test__Address__clone_has_independent_module_path() -> None:
    address = Address([Module("a")], ResourceSpec("t", "n"))
    clone = address.clone()
    assert clone == address
    assert clone is not address
    assert clone.module_path is not address.module_path

    clone.module_path.append(Module("b"))
    assert address.module_path == [Module("a")]
    assert clone.render() == "module.a.module.b.t.n"

    clone.module_path.clear()
    assert address.render() == "module.a.t.n"


def test__Address__copy_delegates_to_clone() -> None:
    address = Address([Module("a")], ResourceSpec("t", "n"))
    copied = copy.copy(address)
    assert copied == address
    assert copied.module_path is not address.module_path


def test__Address__repr() -> None:
    assert repr(Address([Module("a")], ResourceSpec("t", "n"))) == "Address('module.a.t.n')"


def test__Address__to_json() -> None:
    modules = [Module("a", IntegerIndex(0)), Module("b")]
    address = Address(modules, ResourceSpec("t", "n", TextIndex("k")), ResourceMode.DATA)
    assert address.to_json() == {
        "module_path": [{"name": "a", "index": 0}, {"name": "b", "index": None}],
        "mode": "data",
        "type": "t",
        "name": "n",
        "index": "k",
    }


def test__Address__from_json() -> None:
    data = {
        "module_path": [{"name": "a", "index": "x"}],
        "mode": "managed",
        "type": "aws_instance",
        "name": "web",
        "index": None,
    }
    address = Address.from_json(data)
    assert address == Address([Module("a", TextIndex("x"))], ResourceSpec("aws_instance", "web", ABSENT))
    assert Address.from_json(address.to_json()) == address


def test__Address__from_json__rejects_invalid_payloads() -> None:
    with raises(KeyError):
        Address.from_json({"mode": "managed", "type": "t", "name": "n", "index": None})
    with raises(ValueError):
        Address.from_json({"module_path": [], "mode": "resource", "type": "t", "name": "n", "index": None})
