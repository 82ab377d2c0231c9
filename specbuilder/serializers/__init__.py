"""
Output serializers.

- ros: declarative Aliyun Serverless (ROS) template
- component: Serverless Devs component project list
"""

from .component import render_projects
from .ros import render_template

__all__ = ["render_projects", "render_template"]
