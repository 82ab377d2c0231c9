"""
Where: specbuilder/core/domain.py
What: Decide whether a custom domain carrying the HTTP route table is emitted.
Why: Automatic domains stopped being a silent default on 2021/05/01; configs
     without `custom.customDomain` still get one, with a migration notice.
"""

import logging
from typing import List, Optional, Union

from ..models.resolved import ResolvedDomain, RouteEntry
from ..models.spec import CustomDomainSpec

logger = logging.getLogger(__name__)

AUTO_DOMAIN_NAME = "auto"

AUTO_DOMAIN_NOTICE = """
**************************************

Automatic custom domains are no longer configured by default since 2021/05/01.

To keep using an automatic domain, add the following to f.yml:

custom:
  customDomain:
    domainName: auto

**************************************
"""


def resolve_custom_domain(
    custom_domain: Union[CustomDomainSpec, bool, None],
    routes: List[RouteEntry],
) -> Optional[ResolvedDomain]:
    """
    Resolve the custom domain for the accumulated routes.

    - no routes: no domain
    - customDomain set: domain named after domainName (`auto` for the automatic one)
    - customDomain absent: notice, then the automatic domain
    - customDomain false: no domain, no notice
    """
    if not routes:
        return None

    if custom_domain is False:
        return None

    if isinstance(custom_domain, CustomDomainSpec):
        domain_name = custom_domain.domain_name
    else:
        logger.warning(AUTO_DOMAIN_NOTICE)
        domain_name = AUTO_DOMAIN_NAME

    return ResolvedDomain(
        domain_name=domain_name,
        auto=domain_name == AUTO_DOMAIN_NAME,
        routes=list(routes),
    )
