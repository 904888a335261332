from django.http.request import split_domain_port
from django_tenants.utils import remove_www


def normalize_host(host):
    """
    Strip exactly one leading "www" label: "www.www.acme.com" -> "www.acme.com".

    Nothing else is touched. Callers pass a host without a port.
    """
    return remove_www(host or "")


def request_host(request):
    """Hostname of the request, port removed."""
    domain, _port = split_domain_port(request.get_host())
    return domain
