from app.models.base import Base  # noqa: F401

from app.models.department import Department  # noqa: F401
from app.models.city import City  # noqa: F401
from app.models.place import Place  # noqa: F401
from app.models.figure import Figure  # noqa: F401
from app.models.media import Media  # noqa: F401
from app.models.business_plan import BusinessPlan  # noqa: F401
from app.models.api_key import ApiKey  # noqa: F401
