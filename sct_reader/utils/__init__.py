from .export import sector_to_dataframes, ese_to_dataframes, errors_to_dataframe, export_csv

__all__ = [
    'sector_to_dataframes',
    'ese_to_dataframes',
    'errors_to_dataframe',
    'export_csv',
]
