from .euroscope import EuroScopeSource, EuroScopeResult, convert_es_path

__all__ = [
    'EuroScopeSource',
    'EuroScopeResult',
    'convert_es_path',
]
