"""Per-service HTTP clients.

Each module wraps one platform service; `http_client.ServiceClient` holds
the shared request/response handling.
"""

from mainflux_sdk.adapters.bootstrap import Bootstrap
from mainflux_sdk.adapters.certs import Certs
from mainflux_sdk.adapters.channels import Channels
from mainflux_sdk.adapters.domains import Domains
from mainflux_sdk.adapters.groups import Groups
from mainflux_sdk.adapters.health import Health
from mainflux_sdk.adapters.invitations import Invitations
from mainflux_sdk.adapters.journal import Journal
from mainflux_sdk.adapters.messages import Messages
from mainflux_sdk.adapters.things import Things
from mainflux_sdk.adapters.users import Users

__all__ = [
	"Bootstrap",
	"Certs",
	"Channels",
	"Domains",
	"Groups",
	"Health",
	"Invitations",
	"Journal",
	"Messages",
	"Things",
	"Users",
]
