"""AWS Lambda entry point: configure the function handler as ``zonaei.lambda_function.handler``."""

from zonaei.router import build_skill_builder

handler = build_skill_builder().lambda_handler()
