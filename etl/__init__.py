# etl/__init__.py
"""ETL package for cnpj-exporter.

Use como módulos (recomendado):
    python -m etl.split_cnpjs
    python -m etl.validate_data  # opcional
    python -m etl.run_all        # as duas etapas em sequência
"""
__all__ = []
