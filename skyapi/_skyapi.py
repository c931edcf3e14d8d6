from os import environ
from typing import Any, Dict, Optional, Type, TypeVar

from dotenv import load_dotenv
from pydantic import ValidationError

from ._auth import TokenProvider
from ._config import Config
from ._services import (
    ApiClient,
    CoordinateSystemsService,
    DatasetsService,
    DevicesService,
    EmailService,
    ExportsService,
    FilesService,
    FlightLogsService,
    IntegrationsService,
    MeasurementsService,
    MetadataService,
    OverlaysService,
    PrecogJobsService,
    ProcessesService,
    SupportService,
)
from ._services._base_service import BaseService
from ._utils import setup_logging
from ._utils.constants import (
    ENV_AUDIENCE,
    ENV_DOMAIN,
    ENV_ENV,
    ENV_KEY,
    ENV_ORIGIN,
    ENV_RETRIES,
    ENV_SECRET,
    ENV_TENANT,
    ENV_TOKEN,
    ENV_VERSION,
)
from .models.errors import BaseUrlMissingError, InvalidConfigurationError

load_dotenv(override=True)

S = TypeVar("S", bound=BaseService)


class SkyApi:
    def __init__(
        self,
        *,
        env: Optional[str] = None,
        origin: Optional[str] = None,
        domain: Optional[str] = None,
        tenant: Optional[str] = None,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        audience: Optional[str] = None,
        token: Optional[str] = None,
        version: Optional[int] = None,
        retries: Optional[int] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        transport: Optional[Any] = None,
    ) -> None:
        values: Dict[str, Any] = {
            "env": env or environ.get(ENV_ENV),
            "origin": origin or environ.get(ENV_ORIGIN),
            "domain": domain or environ.get(ENV_DOMAIN),
            "tenant": tenant or environ.get(ENV_TENANT),
            "key": key or environ.get(ENV_KEY),
            "secret": secret or environ.get(ENV_SECRET),
            "audience": audience or environ.get(ENV_AUDIENCE),
            "token": token or environ.get(ENV_TOKEN),
            "version": version if version is not None else environ.get(ENV_VERSION),
            "retries": retries if retries is not None else environ.get(ENV_RETRIES),
            "timeout": timeout,
        }

        if not (values["origin"] or values["domain"]):
            raise BaseUrlMissingError()

        try:
            self._config = Config(
                **{name: value for name, value in values.items() if value is not None}
            )
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e

        setup_logging(debug)
        self._transport = transport
        self._token_provider = TokenProvider(self._config, transport=transport)
        self._services: Dict[Type[BaseService], BaseService] = {}

    @property
    def config(self) -> Config:
        return self._config

    @property
    def token_provider(self) -> TokenProvider:
        return self._token_provider

    @property
    def api_client(self) -> ApiClient:
        return self._service(ApiClient)

    @property
    def coordinate_systems(self) -> CoordinateSystemsService:
        return self._service(CoordinateSystemsService)

    @property
    def datasets(self) -> DatasetsService:
        return self._service(DatasetsService)

    @property
    def devices(self) -> DevicesService:
        return self._service(DevicesService)

    @property
    def email(self) -> EmailService:
        return self._service(EmailService)

    @property
    def exports(self) -> ExportsService:
        return self._service(ExportsService)

    @property
    def files(self) -> FilesService:
        return self._service(FilesService)

    @property
    def flight_logs(self) -> FlightLogsService:
        return self._service(FlightLogsService)

    @property
    def integrations(self) -> IntegrationsService:
        return self._service(IntegrationsService)

    @property
    def measurements(self) -> MeasurementsService:
        return self._service(MeasurementsService)

    @property
    def metadata(self) -> MetadataService:
        return self._service(MetadataService)

    @property
    def overlays(self) -> OverlaysService:
        return self._service(OverlaysService)

    @property
    def precog_jobs(self) -> PrecogJobsService:
        return self._service(PrecogJobsService)

    @property
    def processes(self) -> ProcessesService:
        return self._service(ProcessesService)

    @property
    def support(self) -> SupportService:
        return self._service(SupportService)

    def _service(self, service_type: Type[S]) -> S:
        # services share the token provider and keep their connection pools
        if service_type not in self._services:
            self._services[service_type] = service_type(
                self._config, self._token_provider, transport=self._transport
            )
        return self._services[service_type]  # type: ignore[return-value]
