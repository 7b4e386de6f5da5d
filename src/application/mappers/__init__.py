"""Mappers that copy domain objects into wire DTOs."""

from .device_group_element_mapper import DeviceGroupElementMarshaller

__all__ = ["DeviceGroupElementMarshaller"]
