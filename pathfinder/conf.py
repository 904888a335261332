from django.conf import settings


def main_host():
    return str(getattr(settings, "PATHFINDER_MAIN_HOST", "") or "").strip()


def main_hosts():
    hosts = getattr(settings, "PATHFINDER_MAIN_HOSTS", None) or []
    if isinstance(hosts, str):
        hosts = [hosts]
    return [str(h).strip() for h in hosts if str(h).strip()]


def session_course_key():
    return getattr(settings, "PATHFINDER_SESSION_COURSE_KEY", "pathfinder:course")


def session_contextualized_key():
    return getattr(settings, "PATHFINDER_SESSION_CONTEXTUALIZED_KEY", "pathfinder:contextualized")


def domain_store_path():
    return getattr(settings, "PATHFINDER_DOMAIN_STORE", "pathfinder.store.ModelDomainStore")
