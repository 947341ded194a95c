def test_detect_comma(invoke, people_csv):
    res = invoke(["detect", str(people_csv)])
    assert res.exit_code == 0
    assert res.output.strip() == ","


def test_detect_semicolon(invoke, people_semicolon_csv):
    res = invoke(["detect", str(people_semicolon_csv)])
    assert res.exit_code == 0
    assert res.output.strip() == ";"


def test_detect_tab_is_escaped(invoke):
    res = invoke(["detect"], input_data="a\tb\n1\t2\n")
    assert res.exit_code == 0
    assert res.output.strip() == "\\t"


def test_detect_custom_candidates(invoke):
    res = invoke(["detect", "-c", ",|"], input_data="a|b\n1|2\n")
    assert res.exit_code == 0
    assert res.output.strip() == "|"


def test_detect_expected_value(invoke):
    data = "a,b;c\nd,e;f\n"
    assert invoke(["detect"], input_data=data).output.strip() == ","
    res = invoke(["detect", "-e", "c"], input_data=data)
    assert res.exit_code == 0
    assert res.output.strip() == ";"


def test_detect_ambiguous_falls_back(invoke):
    res = invoke(["detect", "-c", ";,"], input_data="single\n")
    assert res.exit_code == 0
    assert res.output.strip() == ";"


def test_detect_invalid_candidates(invoke):
    res = invoke(["detect", "-c", ",,"], input_data="a,b\n")
    assert res.exit_code == 1
    assert "Duplicate candidate" in res.output


def test_detect_undecodable_file(invoke, tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_bytes(b"a,b\n\xff\xfe\n")
    res = invoke(["detect", str(bad)])
    assert res.exit_code == 1
    assert "Error:" in res.output
