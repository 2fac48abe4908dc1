from hearing_lists.api.routes.ingest import ingest_bp
from hearing_lists.api.routes.cases import cases_bp
from hearing_lists.api.routes.monitoring import monitoring_bp

__all__ = ['ingest_bp', 'cases_bp', 'monitoring_bp']
