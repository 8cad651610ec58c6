from io import BytesIO, StringIO

import pytest

from insightplan.io import export_dataframe, load_dataset, metric_columns, parse_records, split_records


def test_load_dataset_from_path(sample_csv_path, sample_df):
    loaded = load_dataset(sample_csv_path)
    assert list(loaded.columns) == list(sample_df.columns)
    assert len(loaded) == len(sample_df)
    assert loaded.loc[0, "Name"] == "Alex Kim"


def test_load_dataset_from_binary_and_text_streams():
    raw = "Name,Math\nA,20\n"
    assert load_dataset(BytesIO(raw.encode("utf-8"))).loc[0, "Math"] == "20"
    assert load_dataset(StringIO(raw)).loc[0, "Name"] == "A"


def test_load_dataset_rejects_non_utf8():
    with pytest.raises(ValueError):
        load_dataset(BytesIO(b"Name,Math\n\xff\xfe,1\n"))


def test_parse_records_keeps_row_order_and_strings():
    df = parse_records("Name,Math,Science\nA,20,30\nB,90,95\n")
    assert list(df.columns) == ["Name", "Math", "Science"]
    assert df["Name"].tolist() == ["A", "B"]
    assert df.loc[1, "Science"] == "95"


def test_parse_records_handles_quotes_and_embedded_commas():
    df = parse_records('Name,Comment,Math\n"Kim, Alex","said ""hi""",80\n')
    assert df.loc[0, "Name"] == "Kim, Alex"
    assert df.loc[0, "Comment"] == 'said "hi"'
    assert df.loc[0, "Math"] == "80"


def test_parse_records_pads_and_truncates_ragged_rows():
    df = parse_records("Name,Math,Science\nA,20\nB,90,95,extra\n")
    assert df.loc[0, "Science"] == ""
    assert df.loc[1, "Science"] == "95"
    assert list(df.columns) == ["Name", "Math", "Science"]
    assert df.attrs["ragged_rows"] == 2


def test_parse_records_drops_all_empty_rows():
    df = parse_records("Name,Math\nA,10\n,\n\n  ,  \nB,20\n")
    assert df["Name"].tolist() == ["A", "B"]


def test_parse_records_empty_input_is_empty_dataset():
    assert parse_records("").empty
    assert parse_records("   \n\n").empty
    header_only = parse_records("Name,Math\n")
    assert header_only.empty
    assert list(header_only.columns) == ["Name", "Math"]


def test_parse_records_strips_bom_and_crlf():
    df = parse_records("\ufeffName,Math\r\nA,20\r\n")
    assert list(df.columns) == ["Name", "Math"]
    assert df.loc[0, "Math"] == "20"


def test_parse_records_dedupes_and_names_blank_headers():
    df = parse_records("Name,Math,Math,\nA,1,2,3\n")
    assert list(df.columns) == ["Name", "Math", "Math.1", "Unnamed: 3"]


def test_split_records_is_naive_about_quotes():
    df = split_records('Name,Math\n"Kim, Alex",80\n')
    assert df.loc[0, "Name"] == '"Kim'
    assert df.loc[0, "Math"] == ' Alex"'


def test_parse_records_truncates_wide_first_row_without_shifting_columns():
    df = parse_records("Name,Math\nA,10,extra\nB,20\n")
    assert list(df.columns) == ["Name", "Math"]
    assert df["Name"].tolist() == ["A", "B"]
    assert df["Math"].tolist() == ["10", "20"]
    assert df.attrs["ragged_rows"] == 1


def test_parse_records_truncates_after_quoted_field():
    df = parse_records('Name,Math\n"Kim, Alex",80,late,again\nB,40\n')
    assert df.loc[0, "Name"] == "Kim, Alex"
    assert df.loc[0, "Math"] == "80"
    assert df.attrs["ragged_rows"] == 1


def test_parse_records_counts_only_non_blank_ragged_rows():
    df = parse_records("Name,Math,Science\nA,1,2\n,,,\nB\n")
    assert df["Name"].tolist() == ["A", "B"]
    assert df.loc[1, "Science"] == ""
    assert df.attrs["ragged_rows"] == 1


def test_metric_columns_skip_name_and_pass(sample_df):
    assert metric_columns(sample_df) == ["Math", "Science", "English", "Computer"]


def test_export_dataframe_creates_parents(tmp_path, sample_df):
    target = export_dataframe(sample_df, tmp_path / "out" / "class.csv")
    assert target.exists()
    assert load_dataset(target)["Name"].tolist() == sample_df["Name"].tolist()
