import pandas as pd


SAMPLE_ROWS = [
    {"Name": "Alex Kim", "Math": "82", "Science": "77", "English": "91", "Computer": "88", "Pass": "Yes"},
    {"Name": "Riley Chen", "Math": "45", "Science": "52", "English": "61", "Computer": "70", "Pass": "Yes"},
    {"Name": "Jordan Patel", "Math": "20", "Science": "31", "English": "28", "Computer": "40", "Pass": "No"},
    {"Name": "Sam Okafor", "Math": "67", "Science": "", "English": "74", "Computer": "59", "Pass": "Yes"},
    {"Name": "Priya Nair", "Math": "95", "Science": "89", "English": "84", "Computer": "97", "Pass": "Yes"},
    {"Name": "Luis Romero", "Math": "33", "Science": "38", "English": "absent", "Computer": "29", "Pass": "No"},
]


def load_sample_dataframe() -> pd.DataFrame:
    df = pd.DataFrame(SAMPLE_ROWS, dtype=str)
    df.attrs["ragged_rows"] = 0
    return df


def sample_csv_text() -> str:
    return load_sample_dataframe().to_csv(index=False)
