import pytest

from app.sample_data import load_sample_dataframe, sample_csv_text


@pytest.fixture()
def sample_df():
    return load_sample_dataframe()


@pytest.fixture()
def sample_csv_path(tmp_path):
    file_path = tmp_path / "sample.csv"
    file_path.write_text(sample_csv_text(), encoding="utf-8")
    return file_path
