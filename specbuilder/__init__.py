"""
Function Compute spec builder.

Translates a provider-agnostic serverless descriptor (f.yml) into an Aliyun
Function Compute ROS template or a Serverless Devs component project list.
"""

from .builder import FCComponentSpecBuilder, FCSpecBuilder, SpecBuilder, build_template

__all__ = ["FCComponentSpecBuilder", "FCSpecBuilder", "SpecBuilder", "build_template"]
