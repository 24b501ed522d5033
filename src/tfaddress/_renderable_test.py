from tfaddress import ABSENT, Address, Module, ModulePath, Renderable, ResourceSpec, TextIndex


def test__Renderable__is_implemented_by_all_address_parts() -> None:
    address = Address.parse('module.a.aws_instance.b["c"]')
    parts = [address, address.module_path, address.resource_spec, Module("a"), ModulePath(), ABSENT, TextIndex("c")]
    for part in parts:
        assert isinstance(part, Renderable), part
    assert not isinstance("module.a", Renderable)
    assert isinstance(ResourceSpec("t", "n"), Renderable)
