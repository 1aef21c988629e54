# DHCPv6 status codes, carried by OPTION_STATUS_CODE

STATUS_SUCCESS = 0  # RFC 8415
STATUS_UNSPEC_FAIL = 1
STATUS_NO_ADDRS_AVAIL = 2
STATUS_NO_BINDING = 3
STATUS_NOT_ON_LINK = 4
STATUS_USE_MULTICAST = 5
STATUS_NO_PREFIX_AVAIL = 6
STATUS_UNKNOWN_QUERY_TYPE = 7  # RFC 5007
STATUS_MALFORMED_QUERY = 8
STATUS_NOT_CONFIGURED = 9
STATUS_NOT_ALLOWED = 10


STATUS_CODE_NAMES = {
    STATUS_SUCCESS: "Success",
    STATUS_UNSPEC_FAIL: "UnspecFail",
    STATUS_NO_ADDRS_AVAIL: "NoAddrsAvail",
    STATUS_NO_BINDING: "NoBinding",
    STATUS_NOT_ON_LINK: "NotOnLink",
    STATUS_USE_MULTICAST: "UseMulticast",
    STATUS_NO_PREFIX_AVAIL: "NoPrefixAvail",
    STATUS_UNKNOWN_QUERY_TYPE: "UnknownQueryType",
    STATUS_MALFORMED_QUERY: "MalformedQuery",
    STATUS_NOT_CONFIGURED: "NotConfigured",
    STATUS_NOT_ALLOWED: "NotAllowed",
}

UNKNOWN_STATUS_NAME = "UnknownStatusCode"
