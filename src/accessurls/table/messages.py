"""Fixed texts shown in the access URL section."""

SECTION_TITLE = "Access URLs"

COLUMNS = ("URL", "Type", "Notes")

LOADING = "Loading..."

NO_PUBLIC_URL = "The current application does not expose a public URL."

UNKNOWN_NOTE = "Unknown"

# URL cell of an Ingress row whose resource could not be resolved
UNKNOWN_URL = "Unknown"

INGRESS_TYPE = "Ingress"

ERROR_NOTE = "Error: {message}"

IPS_NOTE = "IP(s): {ips}"

PENDING_IP_NOTE = "Not associated with any IP."

PENDING_IP_HELP = """\
Depending on your cloud provider of choice, it may take some time for an access URL to be \
available for the application and the Service will stay in a "Pending" state until a URL is \
assigned. If using Minikube, you will need to run `minikube tunnel` in your terminal in order \
for an IP address to be assigned to your application."""
