from types import SimpleNamespace as NS


def split_num_outputs(attrs):
    return int(attrs.dict.get("num_outputs", "1"))


def concat_num_inputs(attrs):
    return int(attrs.dict.get("num_args", "2"))


def split_parser(attrs):
    return NS(
        num_outputs=int(attrs.dict.get("num_outputs", "1")),
        axis=int(attrs.dict.get("axis", "0")),
    )


def register_test_operators():
    from nnir.graphs.nnir import register_operator, has_operator

    if not has_operator("test.add"):
        register_operator("test.add", num_inputs=2, num_outputs=1)
    if not has_operator("test.split"):
        register_operator(
            "test.split",
            num_inputs=1,
            num_outputs=split_num_outputs,
            attr_parser=split_parser,
        )
    if not has_operator("test.concat"):
        register_operator("test.concat", num_inputs=concat_num_inputs, num_outputs=1)
    if not has_operator("test.assign"):
        register_operator(
            "test.assign", num_inputs=2, num_outputs=1, mutate_inputs=[0]
        )


def diamond_graph():
    """
    Return (a, b, c, d) entries of:
    b = split(a, num_outputs=2); c = add(b[0], b[1]); d = add(c, a)
    """
    import nnir.graphs.nnir.operations as O

    register_test_operators()
    a = O.variable("a")
    b0, b1 = O.apply("test.split", a, name="b", num_outputs=2)
    (c,) = O.apply("test.add", b0, b1, name="c")
    (d,) = O.apply("test.add", c, a, name="d")
    return a, b0, c, d
