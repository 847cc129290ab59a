from shiftargs import tokens

# --- Parse Arg -------------------------------------------------------------- #


def test_parse_argument():
    toks = tokens.parseArg("foo")
    assert toks == [tokens.ArgumentToken("foo")]
    assert toks[0].kind == "argument"


def test_parse_empty_argument():
    assert tokens.parseArg("") == [tokens.ArgumentToken("")]


def test_parse_option():
    toks = tokens.parseArg("--verbose")
    assert toks == [tokens.OptionToken("verbose")]
    assert toks[0].kind == "option"
    assert str(toks[0]) == "--verbose"


def test_parse_option_with_value():
    assert tokens.parseArg("--name=Kyle") == [
        tokens.OptionToken("name"),
        tokens.ArgumentToken("Kyle"),
    ]


def test_parse_option_splits_on_first_equal():
    assert tokens.parseArg("--define=a=b") == [
        tokens.OptionToken("define"),
        tokens.ArgumentToken("a=b"),
    ]


def test_parse_option_with_empty_value():
    assert tokens.parseArg("--name=") == [
        tokens.OptionToken("name"),
        tokens.ArgumentToken(""),
    ]


def test_parse_option_without_split():
    assert tokens.parseArg("--name=Kyle", splitEquals=False) == [
        tokens.OptionToken("name=Kyle")
    ]


def test_parse_double_dash():
    toks = tokens.parseArg("--")
    assert toks == [tokens.OptionToken("")]
    assert str(toks[0]) == "--"


def test_parse_short_flags():
    toks = tokens.parseArg("-abc")
    assert len(toks) == 1
    flag = toks[0]
    assert isinstance(flag, tokens.FlagToken)
    assert flag.kind == "flag"
    assert flag.flags == ("a", "b", "c")
    assert flag.has("b")
    assert not flag.has("d")


def test_parse_short_flags_collapse_duplicates():
    flag = tokens.parseArg("-abab")[0]
    assert isinstance(flag, tokens.FlagToken)
    assert flag.flags == ("a", "b")
    assert str(flag) == "-ab"


def test_parse_short_flags_keep_first_seen_order():
    assert str(tokens.parseArg("-ba")[0]) == "-ba"
    assert tokens.FlagToken.fromStr("ba").has("a")


def test_parse_single_dash():
    flag = tokens.parseArg("-")[0]
    assert isinstance(flag, tokens.FlagToken)
    assert flag.isEmpty()
    assert str(flag) == "-"


def test_parse_negative_number_is_a_flag():
    assert tokens.parseArg("-1") == [tokens.FlagToken(("1",))]


# --- Flag Token ------------------------------------------------------------- #


def test_flag_without():
    flag = tokens.FlagToken.fromStr("vn")
    rest = flag.without("v")
    assert str(rest) == "-n"
    assert str(flag) == "-vn"
    assert rest.without("n").isEmpty()


# --- Tokenize --------------------------------------------------------------- #


def test_tokenize():
    assert tokens.tokenize(["build", "--release", "-vj", "4", "--out=dist"]) == [
        tokens.ArgumentToken("build"),
        tokens.OptionToken("release"),
        tokens.FlagToken(("v", "j")),
        tokens.ArgumentToken("4"),
        tokens.OptionToken("out"),
        tokens.ArgumentToken("dist"),
    ]


def test_tokenize_empty():
    assert tokens.tokenize([]) == []


def test_tokenize_renders_back():
    args = ["a", "--x", "-vn", "b", "--", "-"]
    assert [str(tok) for tok in tokens.tokenize(args)] == args


def test_tokenize_renders_split_options_as_two():
    assert [str(tok) for tok in tokens.tokenize(["--name=Kyle"])] == ["--name", "Kyle"]


def test_flags_compare_as_sets():
    assert tokens.tokenize(["-ab"]) == tokens.tokenize(["-ba"])
    assert tokens.tokenize(["-aab"]) == tokens.tokenize(["-ab"])
    assert hash(tokens.FlagToken.fromStr("ab")) == hash(tokens.FlagToken.fromStr("ba"))
    assert tokens.FlagToken.fromStr("ab") != tokens.FlagToken.fromStr("abc")


def test_flags_render_in_first_seen_order():
    assert [str(tok) for tok in tokens.tokenize(["-ba", "-ab"])] == ["-ba", "-ab"]
