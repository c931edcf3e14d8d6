from .api_client import ApiClient
from .coordinate_systems_service import CoordinateSystemsService
from .datasets_service import DatasetsService
from .devices_service import DevicesService
from .email_service import EmailService
from .exports_service import ExportsService
from .files_service import FilesService
from .flight_logs_service import FlightLogsService
from .integrations_service import IntegrationsService
from .measurements_service import MeasurementsService
from .metadata_service import MetadataService
from .overlays_service import OverlaysService
from .precog_jobs_service import PrecogJobsService
from .processes_service import ProcessesService
from .support_service import SupportService

__all__ = [
    "ApiClient",
    "CoordinateSystemsService",
    "DatasetsService",
    "DevicesService",
    "EmailService",
    "ExportsService",
    "FilesService",
    "FlightLogsService",
    "IntegrationsService",
    "MeasurementsService",
    "MetadataService",
    "OverlaysService",
    "PrecogJobsService",
    "ProcessesService",
    "SupportService",
]
