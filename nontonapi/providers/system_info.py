# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import os
import platform
import shutil
import sys
import time
from datetime import datetime, timezone

import requests

from nontonapi.constants import IP_API_TIMEOUT, IP_API_URL
from nontonapi.providers.log import error

_GB = 1024**3
_MB = 1024**2

_started = time.monotonic()


def _gb(value):
    return f"{value / _GB:.2f}"


def format_uptime(seconds):
    seconds = int(seconds)
    days, seconds = divmod(seconds, 3600 * 24)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{days}d {hours}h {minutes}m {seconds}s"


def _system_uptime():
    try:
        with open("/proc/uptime", "r") as f:
            return float(f.readline().split()[0])
    except (OSError, ValueError, IndexError):
        return time.monotonic() - _started


def get_memory_info():
    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
        total = os.sysconf("SC_PHYS_PAGES") * page_size
        free = os.sysconf("SC_AVPHYS_PAGES") * page_size
    except (AttributeError, ValueError, OSError):
        return {"total_gb": "N/A", "used_gb": "N/A", "free_gb": "N/A"}

    return {
        "total_gb": _gb(total),
        "used_gb": _gb(total - free),
        "free_gb": _gb(free),
    }


def get_process_memory_mb():
    try:
        with open("/proc/self/statm", "r") as f:
            rss_pages = int(f.readline().split()[1])
        return f"{rss_pages * os.sysconf('SC_PAGE_SIZE') / _MB:.2f}"
    except (OSError, ValueError, IndexError, AttributeError):
        pass

    try:
        import resource
    except ImportError:
        return "N/A"
    # peak rather than current RSS, in bytes on macOS and kilobytes elsewhere
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform != "darwin":
        peak *= 1024
    return f"{peak / _MB:.2f}"


def get_cpu_model():
    try:
        with open("/proc/cpuinfo", "r") as f:
            for line in f:
                key, _, value = line.partition(":")
                if key.strip() == "model name" and value.strip():
                    return value.strip()
    except OSError:
        pass
    return platform.processor() or "N/A (Details Restricted)"


def get_disk_info():
    candidates = [("/", "Data taken from root directory (/)")]
    home = os.path.expanduser("~")
    candidates.append((home, f"Data taken from home directory ({home})"))

    for path, note in candidates:
        try:
            total, used, free = shutil.disk_usage(path)
        except OSError as e:
            error(f"Could not read disk usage of {path}: {e}")
            continue
        return {
            "total_gb": _gb(total),
            "used_gb": _gb(used),
            "free_gb": _gb(free),
            "note": note,
        }

    return {
        "total_gb": "N/A",
        "used_gb": "N/A",
        "free_gb": "N/A",
        "note": "Failed to read disk usage, check permissions.",
    }


def get_network_info(session=None):
    unavailable = "N/A (Failed to fetch)"
    network = {
        "public_ip": unavailable,
        "isp": unavailable,
        "location": unavailable,
        "api_latency": "N/A",
    }

    try:
        started = time.monotonic()
        r = (session or requests).get(IP_API_URL, timeout=IP_API_TIMEOUT)
        latency = int((time.monotonic() - started) * 1000)
        data = r.json()
    except Exception as e:
        error(f"Could not fetch public IP details: {e}")
        return network

    if data.get("status") == "success":
        return {
            "public_ip": data.get("query"),
            "isp": data.get("isp"),
            "location": f"{data.get('country')} ({data.get('city')})",
            "api_latency": f"{latency}ms",
        }

    network["public_ip"] = f"API Error: {data.get('message') or 'Unknown response status'}"
    return network


def get_server_info(session=None):
    cpu_cores = os.cpu_count()

    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "runtime_uptime": format_uptime(_system_uptime()),
        "system": {
            "os": f"{platform.system()} {platform.release()} ({platform.machine()})",
            "cpu_model": get_cpu_model(),
            "cpu_cores": cpu_cores if cpu_cores else "N/A",
        },
        "memory": {
            **get_memory_info(),
            "process_mem_mb": get_process_memory_mb(),
        },
        "storage": get_disk_info(),
        "network": get_network_info(session),
    }
