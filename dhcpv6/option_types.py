"""
Module containing the definition of known / supported DHCPv6 option types.

Each option type is a struct-like object with a fixed code and a schema
describing its payload. Importing this module registers every type in the
options registry, so that :py:func:`~dhcpv6.options.decode_options`
returns typed records for them.

Most of these come from RFC 8415; the others are named after the RFC
defining them.
"""

from dhcpv6.constants import option_codes, status_code_name
from dhcpv6.constants.duid_types import DUID_MAX_LENGTH
from dhcpv6.duid import DUIDField
from dhcpv6.options import Option, OptionsField, register_option
from dhcpv6.structs import (
    DomainNameField,
    IntField,
    IPv6AddressField,
    ListField,
    OpaqueField,
    RemainingBytes,
    StringField,
)

__all__ = [
    "ClientId",
    "ServerId",
    "IANA",
    "IATA",
    "IAAddress",
    "RequestedOptions",
    "Preference",
    "ElapsedTime",
    "RelayMessage",
    "ServerUnicast",
    "StatusCode",
    "RapidCommit",
    "UserClass",
    "VendorClass",
    "VendorOptions",
    "InterfaceId",
    "ReconfigureMessage",
    "ReconfigureAccept",
    "DNSRecursiveNameServer",
    "DomainSearchList",
    "IAPD",
    "IAPrefix",
    "InformationRefreshTime",
    "RemoteId",
    "BootFileURL",
    "ClientArchType",
    "NetworkInterfaceId",
    "SolMaxRT",
    "InfMaxRT",
]


class DUIDOptionMixin(object):
    """Checks shared by the options carrying a DUID"""

    __slots__ = []

    def _check(self, report):
        length = len(self.duid.pack())
        if length > DUID_MAX_LENGTH:
            report(
                "{0}: DUID is {1} bytes long, more than {2}".format(
                    self.name, length, DUID_MAX_LENGTH
                )
            )


class IdentityAssociationMixin(object):
    """Checks shared by IA_NA and IA_PD"""

    __slots__ = []

    def _check(self, report):
        if self.t1 and self.t2 and self.t1 > self.t2:
            report(
                "{0} {1}: T1 ({2}) is greater than T2 ({3})".format(
                    self.name, self.iaid, self.t1, self.t2
                )
            )


class LifetimesMixin(object):
    """Checks shared by IAADDR and IAPREFIX"""

    __slots__ = []

    def _check(self, report):
        if self.preferred_lifetime > self.valid_lifetime:
            report(
                "{0}: preferred lifetime ({1}) is greater than "
                "valid lifetime ({2})".format(
                    self.name, self.preferred_lifetime, self.valid_lifetime
                )
            )


@register_option
class ClientId(DUIDOptionMixin, Option):
    """Client Identifier option: the DUID of the client"""

    code = option_codes.OPTION_CLIENTID
    __slots__ = []
    schema = [("duid", DUIDField(), None)]


@register_option
class ServerId(DUIDOptionMixin, Option):
    """Server Identifier option: the DUID of the server"""

    code = option_codes.OPTION_SERVERID
    __slots__ = []
    schema = [("duid", DUIDField(), None)]


@register_option
class IANA(IdentityAssociationMixin, Option):
    """
    Identity Association for Non-temporary Addresses option.

    ``options`` usually holds :py:class:`IAAddress` and
    :py:class:`StatusCode` options.
    """

    code = option_codes.OPTION_IA_NA
    __slots__ = []
    schema = [
        ("iaid", IntField(32), None),
        ("t1", IntField(32), 0),
        ("t2", IntField(32), 0),
        ("options", OptionsField(), ()),
    ]


@register_option
class IATA(Option):
    """Identity Association for Temporary Addresses option (deprecated)"""

    code = option_codes.OPTION_IA_TA
    __slots__ = []
    schema = [
        ("iaid", IntField(32), None),
        ("options", OptionsField(), ()),
    ]


@register_option
class IAAddress(LifetimesMixin, Option):
    """IA Address option, lifetimes are in seconds"""

    code = option_codes.OPTION_IAADDR
    __slots__ = []
    schema = [
        ("address", IPv6AddressField(), None),
        ("preferred_lifetime", IntField(32), 0),
        ("valid_lifetime", IntField(32), 0),
        ("options", OptionsField(), ()),
    ]


@register_option
class RequestedOptions(Option):
    """Option Request option: codes of the options a client is asking for"""

    code = option_codes.OPTION_ORO
    __slots__ = []
    schema = [("requested_options", ListField(IntField(16)), ())]

    def _check(self, report):
        seen = set()
        for code in self.requested_options:
            if code in seen:
                report("{0}: option {1} requested twice".format(self.name, code))
            seen.add(code)

    def _fix(self):
        # Keep the first occurrence of each code
        self._decoded["requested_options"] = list(
            dict.fromkeys(self.requested_options)
        )


@register_option
class Preference(Option):
    code = option_codes.OPTION_PREFERENCE
    __slots__ = []
    schema = [("preference", IntField(8), 0)]


@register_option
class ElapsedTime(Option):
    """Elapsed Time option, in hundredths of a second"""

    code = option_codes.OPTION_ELAPSED_TIME
    __slots__ = []
    schema = [("elapsed_time", IntField(16), 0)]


@register_option
class RelayMessage(Option):
    """Relay Message option: an encapsulated DHCPv6 message, kept raw"""

    code = option_codes.OPTION_RELAY_MSG
    __slots__ = []
    schema = [("relay_message", RemainingBytes(), b"")]


@register_option
class ServerUnicast(Option):
    code = option_codes.OPTION_UNICAST
    __slots__ = []
    schema = [("address", IPv6AddressField(), None)]


@register_option
class StatusCode(Option):
    """Status Code option: a numeric code and an UTF-8 message for humans"""

    code = option_codes.OPTION_STATUS_CODE
    __slots__ = []
    schema = [
        ("status_code", IntField(16), 0),
        ("status_message", StringField(), ""),
    ]

    def describe(self):
        return "{0} -> {1} ({2}): {3}".format(
            self.name,
            status_code_name(self.status_code),
            self.status_code,
            self.status_message,
        )


@register_option
class RapidCommit(Option):
    code = option_codes.OPTION_RAPID_COMMIT
    __slots__ = []
    schema = []


@register_option
class UserClass(Option):
    code = option_codes.OPTION_USER_CLASS
    __slots__ = []
    schema = [("user_classes", ListField(OpaqueField()), ())]


@register_option
class VendorClass(Option):
    code = option_codes.OPTION_VENDOR_CLASS
    __slots__ = []
    schema = [
        ("enterprise_number", IntField(32), None),
        ("vendor_classes", ListField(OpaqueField()), ()),
    ]


@register_option
class VendorOptions(Option):
    """
    Vendor-specific Information option. The vendor data is interpreted
    by vendor-specific code, so it is kept as raw bytes here.
    """

    code = option_codes.OPTION_VENDOR_OPTS
    __slots__ = []
    schema = [
        ("enterprise_number", IntField(32), None),
        ("vendor_data", RemainingBytes(), b""),
    ]


@register_option
class InterfaceId(Option):
    code = option_codes.OPTION_INTERFACE_ID
    __slots__ = []
    schema = [("interface_id", RemainingBytes(), b"")]


@register_option
class ReconfigureMessage(Option):
    code = option_codes.OPTION_RECONF_MSG
    __slots__ = []
    schema = [("message_type", IntField(8), None)]


@register_option
class ReconfigureAccept(Option):
    code = option_codes.OPTION_RECONF_ACCEPT
    __slots__ = []
    schema = []


@register_option
class DNSRecursiveNameServer(Option):
    """RFC 3646: addresses of DNS recursive name servers"""

    code = option_codes.OPTION_DNS_SERVERS
    __slots__ = []
    schema = [("name_servers", ListField(IPv6AddressField()), ())]


@register_option
class DomainSearchList(Option):
    """RFC 3646: domain search list, as uncompressed domain names"""

    code = option_codes.OPTION_DOMAIN_LIST
    __slots__ = []
    schema = [("search_list", ListField(DomainNameField()), ())]


@register_option
class IAPD(IdentityAssociationMixin, Option):
    """Identity Association for Prefix Delegation option"""

    code = option_codes.OPTION_IA_PD
    __slots__ = []
    schema = [
        ("iaid", IntField(32), None),
        ("t1", IntField(32), 0),
        ("t2", IntField(32), 0),
        ("options", OptionsField(), ()),
    ]


@register_option
class IAPrefix(LifetimesMixin, Option):
    """IA Prefix option, lifetimes are in seconds"""

    code = option_codes.OPTION_IAPREFIX
    __slots__ = []
    schema = [
        ("preferred_lifetime", IntField(32), 0),
        ("valid_lifetime", IntField(32), 0),
        ("prefix_length", IntField(8), None),
        ("prefix", IPv6AddressField(), None),
        ("options", OptionsField(), ()),
    ]

    def _check(self, report):
        super(IAPrefix, self)._check(report)
        if self.prefix_length > 128:
            report(
                "{0}: prefix length {1} is greater than 128".format(
                    self.name, self.prefix_length
                )
            )


@register_option
class InformationRefreshTime(Option):
    code = option_codes.OPTION_INFORMATION_REFRESH_TIME
    __slots__ = []
    schema = [("refresh_time", IntField(32), None)]


@register_option
class RemoteId(Option):
    """RFC 4649: relay agent remote-id, scoped by an enterprise number"""

    code = option_codes.OPTION_REMOTE_ID
    __slots__ = []
    schema = [
        ("enterprise_number", IntField(32), None),
        ("remote_id", RemainingBytes(), b""),
    ]


@register_option
class BootFileURL(Option):
    code = option_codes.OPTION_BOOTFILE_URL
    __slots__ = []
    schema = [("url", StringField(), None)]


@register_option
class ClientArchType(Option):
    """RFC 5970: client system architecture types, see RFC 4578"""

    code = option_codes.OPTION_CLIENT_ARCH_TYPE
    __slots__ = []
    schema = [("arch_types", ListField(IntField(16)), ())]


@register_option
class NetworkInterfaceId(Option):
    """RFC 5970: client network interface identifier (UNDI revision)"""

    code = option_codes.OPTION_NII
    __slots__ = []
    schema = [
        ("interface_type", IntField(8), None),
        ("major", IntField(8), 0),
        ("minor", IntField(8), 0),
    ]


@register_option
class SolMaxRT(Option):
    code = option_codes.OPTION_SOL_MAX_RT
    __slots__ = []
    schema = [("sol_max_rt", IntField(32), None)]


@register_option
class InfMaxRT(Option):
    code = option_codes.OPTION_INF_MAX_RT
    __slots__ = []
    schema = [("inf_max_rt", IntField(32), None)]
