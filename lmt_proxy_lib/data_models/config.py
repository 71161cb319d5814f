"""
Connection settings of the translation engine.

The model is built once by the REST service from its environment constants
and handed explicitly to every client; the library itself never reads the
environment.
"""

from pydantic import BaseModel

from lmt_proxy_lib.data_models.constants import DEFAULT_ENGINE_URL


class UpstreamConfig(BaseModel):
    """
    Attributes
    ----------
    url : str
        JSON‑RPC endpoint of the engine.
    session : str
        Session credential, sent as the ``dl_session`` cookie.
    timeout : float
        Per‑call timeout in seconds.
    """

    url: str = DEFAULT_ENGINE_URL
    session: str = ""
    timeout: float = 30

    accept_language: str = "zh-CN,zh;q=0.9"
    origin: str = "https://www.deepl.com"
    referer: str = "https://www.deepl.com/"
    user_agent: str = (
        "DeepLBrowserExtension/1.28.0 Mozilla/5.0 (Macintosh; Intel Mac OS X "
        "10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/127.0.0.0 "
        "Safari/537.36"
    )
