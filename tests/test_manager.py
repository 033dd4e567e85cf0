import pytest

from bddkit.manager import Manager, UniqueTableEntry


@pytest.fixture
def env():
    manager = Manager()
    a = manager.create_var("a")
    b = manager.create_var("b")
    c = manager.create_var("c")
    return manager, a, b, c


def test_true_and_false_nodes(env):
    manager, *_ = env
    assert manager.top_var(manager.true()) == manager.true()
    assert manager.get_label(manager.true()) == "True"
    assert manager.top_var(manager.false()) == manager.false()
    assert manager.get_label(manager.false()) == "False"
    assert manager.true() != manager.false()
    assert manager.false() == 0 and manager.true() == 1


def test_create_var(env):
    _, a, b, c = env
    assert (a, b, c) == (2, 3, 4)


def test_unique_table_size_increases_after_creating_var(env):
    manager, *_ = env
    initial = manager.unique_table_size()
    manager.create_var("test_var")
    assert manager.unique_table_size() == initial + 1


def test_is_constant(env):
    manager, *_ = env
    manager.and2(2, 3)
    for i in range(manager.unique_table_size()):
        assert manager.is_constant(i) == (i in (manager.false(), manager.true()))


def test_is_variable(env):
    manager, a, b, c = env
    manager.or2(a, c)
    for i in range(manager.unique_table_size()):
        assert manager.is_variable(i) == (i in (a, b, c))


def test_key_gen():
    key1 = Manager.key_gen(2, 3, 4)
    key2 = Manager.key_gen(5, 6, 7)
    assert key1 != key2
    assert key1 == Manager.key_gen(2, 3, 4)
    assert Manager.key_gen(0, 0, 0) == 0


def test_ite(env):
    manager, a, b, _ = env
    t, f = manager.true(), manager.false()
    assert manager.ite(t, a, b) == a
    assert manager.ite(f, a, b) == b
    assert manager.ite(a, b, b) == b

    result = manager.ite(a, t, f)
    assert manager.ite(a, t, f) == result

    result = manager.ite(a, b, t)
    assert result not in (a, b, t, f)
    assert manager.high_successor(result) == b
    assert manager.low_successor(result) == t
    assert manager.top_var(result) == a


def test_ite_reuses_computed_node(env):
    manager, a, b, _ = env
    first = manager.and2(a, b)
    size = manager.unique_table_size()
    assert manager.and2(a, b) == first
    assert manager.unique_table_size() == size


def test_co_factor_true(env):
    manager, a, b, _ = env
    assert manager.co_factor_true(manager.true(), a) == manager.true()
    assert manager.co_factor_true(manager.false(), a) == manager.false()
    f = manager.and2(a, b)
    assert manager.co_factor_true(f, a) == manager.high_successor(f)
    assert manager.co_factor_true(f) == b


def test_co_factor_false(env):
    manager, a, b, _ = env
    assert manager.co_factor_false(manager.true(), a) == manager.true()
    assert manager.co_factor_false(manager.false(), a) == manager.false()
    f = manager.and2(a, b)
    assert manager.co_factor_false(f, a) == manager.unique_table[f].low
    assert manager.co_factor_false(f) == manager.false()


def test_co_factor_below_top_variable(env):
    manager, a, b, _ = env
    f = manager.or2(a, b)
    assert manager.co_factor_true(f, b) == manager.true()
    assert manager.co_factor_false(f, b) == a


def test_neg(env):
    manager, a, *_ = env
    assert manager.neg(manager.true()) == manager.false()
    assert manager.neg(manager.false()) == manager.true()
    assert manager.neg(a) == manager.ite(a, manager.false(), manager.true())
    assert manager.neg(manager.neg(a)) == a


def test_and2(env):
    manager, a, b, _ = env
    f = manager.and2(a, b)
    assert manager.high_successor(f) == b
    assert manager.low_successor(f) == manager.false()


def test_or2(env):
    manager, a, b, _ = env
    f = manager.or2(a, b)
    assert manager.high_successor(f) == manager.true()
    assert manager.low_successor(f) == b


def test_xor2(env):
    manager, a, b, _ = env
    f = manager.xor2(a, b)
    assert manager.high_successor(f) == manager.neg(b)
    assert manager.low_successor(f) == b


def test_nand2(env):
    manager, a, b, _ = env
    f = manager.nand2(a, b)
    assert manager.high_successor(f) == manager.neg(b)
    assert manager.low_successor(f) == manager.true()


def test_nor2(env):
    manager, a, b, _ = env
    f = manager.nor2(a, b)
    assert manager.high_successor(f) == manager.false()
    assert manager.low_successor(f) == manager.neg(b)


def test_xnor2(env):
    manager, a, b, _ = env
    f = manager.xnor2(a, b)
    assert manager.low_successor(f) == manager.neg(b)
    assert manager.high_successor(f) == b


def test_top_var(env):
    manager, a, b, _ = env
    manager.and2(a, b)
    assert manager.top_var(5) == 2
    assert manager.get_top_var_name(5) == "a"


def test_get_top_var_name(env):
    manager, a, b, _ = env
    f = manager.and2(a, b)
    assert manager.get_top_var_name(f) == "a"


def test_find_nodes(env):
    manager, a, b, _ = env
    f = manager.and2(a, b)
    assert manager.find_nodes(f) == {f, b, manager.true(), manager.false()}


def test_find_vars(env):
    manager, a, b, c = env
    f = manager.and2(a, b)
    assert manager.find_vars(f) == {a, b}
    assert manager.find_vars(manager.true()) == set()
    assert manager.find_vars(c) == {c}


def test_unique_table_entry_fields(env):
    manager, a, *_ = env
    assert manager.unique_table[a] == UniqueTableEntry("a", a, manager.true(), manager.false(), a)


def test_visualize_bdd(env, tmp_path):
    manager, a, b, _ = env
    f = manager.and2(a, b)
    path = tmp_path / "out.dot"
    manager.visualize_bdd(path, f)
    text = path.read_text()
    lines = text.splitlines()
    assert lines[:3] == ["strict digraph ROBDD {", "  0 [shape = square];", "  1 [shape = square];"]
    assert lines[-1] == "}"
    assert '  a -> 0 [label="0"] [style = "dashed"]' in lines
    assert '  a -> b [label="1"]' in lines
    assert '  b -> 1 [label="1"]' in lines


def test_unknown_node_raises():
    manager = Manager()
    with pytest.raises(IndexError):
        manager.top_var(10)