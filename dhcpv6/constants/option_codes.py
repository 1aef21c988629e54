# DHCPv6 option codes
# See: https://www.iana.org/assignments/dhcpv6-parameters

OPTION_CLIENTID = 1  # RFC 8415
OPTION_SERVERID = 2
OPTION_IA_NA = 3
OPTION_IA_TA = 4
OPTION_IAADDR = 5
OPTION_ORO = 6
OPTION_PREFERENCE = 7
OPTION_ELAPSED_TIME = 8
OPTION_RELAY_MSG = 9
OPTION_AUTH = 11
OPTION_UNICAST = 12
OPTION_STATUS_CODE = 13
OPTION_RAPID_COMMIT = 14
OPTION_USER_CLASS = 15
OPTION_VENDOR_CLASS = 16
OPTION_VENDOR_OPTS = 17
OPTION_INTERFACE_ID = 18
OPTION_RECONF_MSG = 19
OPTION_RECONF_ACCEPT = 20
OPTION_SIP_SERVER_D = 21  # RFC 3319
OPTION_SIP_SERVER_A = 22
OPTION_DNS_SERVERS = 23  # RFC 3646
OPTION_DOMAIN_LIST = 24
OPTION_IA_PD = 25  # RFC 8415 (was RFC 3633)
OPTION_IAPREFIX = 26
OPTION_NIS_SERVERS = 27  # RFC 3898
OPTION_NISP_SERVERS = 28
OPTION_NIS_DOMAIN_NAME = 29
OPTION_NISP_DOMAIN_NAME = 30
OPTION_SNTP_SERVERS = 31  # RFC 4075
OPTION_INFORMATION_REFRESH_TIME = 32  # RFC 8415 (was RFC 4242)
OPTION_BCMCS_SERVER_D = 33  # RFC 4280
OPTION_BCMCS_SERVER_A = 34
OPTION_GEOCONF_CIVIC = 36  # RFC 4776
OPTION_REMOTE_ID = 37  # RFC 4649
OPTION_SUBSCRIBER_ID = 38  # RFC 4580
OPTION_CLIENT_FQDN = 39  # RFC 4704
OPTION_PANA_AGENT = 40  # RFC 5192
OPTION_NEW_POSIX_TIMEZONE = 41  # RFC 4833
OPTION_NEW_TZDB_TIMEZONE = 42
OPTION_ERO = 43  # RFC 4994
OPTION_LQ_QUERY = 44  # RFC 5007
OPTION_CLIENT_DATA = 45
OPTION_CLT_TIME = 46
OPTION_LQ_RELAY_DATA = 47
OPTION_LQ_CLIENT_LINK = 48
OPTION_NTP_SERVER = 56  # RFC 5908
OPTION_BOOTFILE_URL = 59  # RFC 5970
OPTION_BOOTFILE_PARAM = 60
OPTION_CLIENT_ARCH_TYPE = 61
OPTION_NII = 62
OPTION_ERP_LOCAL_DOMAIN_NAME = 65  # RFC 6440
OPTION_RELAY_SUPPLIED_OPTIONS = 66  # RFC 6422
OPTION_VSS = 68  # RFC 6607
OPTION_CLIENT_LINKLAYER_ADDR = 79  # RFC 6939
OPTION_SOL_MAX_RT = 82  # RFC 8415 (was RFC 7083)
OPTION_INF_MAX_RT = 83


OPTION_NAMES = {
    OPTION_CLIENTID: "OPTION_CLIENTID",
    OPTION_SERVERID: "OPTION_SERVERID",
    OPTION_IA_NA: "OPTION_IA_NA",
    OPTION_IA_TA: "OPTION_IA_TA",
    OPTION_IAADDR: "OPTION_IAADDR",
    OPTION_ORO: "OPTION_ORO",
    OPTION_PREFERENCE: "OPTION_PREFERENCE",
    OPTION_ELAPSED_TIME: "OPTION_ELAPSED_TIME",
    OPTION_RELAY_MSG: "OPTION_RELAY_MSG",
    OPTION_AUTH: "OPTION_AUTH",
    OPTION_UNICAST: "OPTION_UNICAST",
    OPTION_STATUS_CODE: "OPTION_STATUS_CODE",
    OPTION_RAPID_COMMIT: "OPTION_RAPID_COMMIT",
    OPTION_USER_CLASS: "OPTION_USER_CLASS",
    OPTION_VENDOR_CLASS: "OPTION_VENDOR_CLASS",
    OPTION_VENDOR_OPTS: "OPTION_VENDOR_OPTS",
    OPTION_INTERFACE_ID: "OPTION_INTERFACE_ID",
    OPTION_RECONF_MSG: "OPTION_RECONF_MSG",
    OPTION_RECONF_ACCEPT: "OPTION_RECONF_ACCEPT",
    OPTION_SIP_SERVER_D: "OPTION_SIP_SERVER_D",
    OPTION_SIP_SERVER_A: "OPTION_SIP_SERVER_A",
    OPTION_DNS_SERVERS: "OPTION_DNS_SERVERS",
    OPTION_DOMAIN_LIST: "OPTION_DOMAIN_LIST",
    OPTION_IA_PD: "OPTION_IA_PD",
    OPTION_IAPREFIX: "OPTION_IAPREFIX",
    OPTION_NIS_SERVERS: "OPTION_NIS_SERVERS",
    OPTION_NISP_SERVERS: "OPTION_NISP_SERVERS",
    OPTION_NIS_DOMAIN_NAME: "OPTION_NIS_DOMAIN_NAME",
    OPTION_NISP_DOMAIN_NAME: "OPTION_NISP_DOMAIN_NAME",
    OPTION_SNTP_SERVERS: "OPTION_SNTP_SERVERS",
    OPTION_INFORMATION_REFRESH_TIME: "OPTION_INFORMATION_REFRESH_TIME",
    OPTION_BCMCS_SERVER_D: "OPTION_BCMCS_SERVER_D",
    OPTION_BCMCS_SERVER_A: "OPTION_BCMCS_SERVER_A",
    OPTION_GEOCONF_CIVIC: "OPTION_GEOCONF_CIVIC",
    OPTION_REMOTE_ID: "OPTION_REMOTE_ID",
    OPTION_SUBSCRIBER_ID: "OPTION_SUBSCRIBER_ID",
    OPTION_CLIENT_FQDN: "OPTION_CLIENT_FQDN",
    OPTION_PANA_AGENT: "OPTION_PANA_AGENT",
    OPTION_NEW_POSIX_TIMEZONE: "OPTION_NEW_POSIX_TIMEZONE",
    OPTION_NEW_TZDB_TIMEZONE: "OPTION_NEW_TZDB_TIMEZONE",
    OPTION_ERO: "OPTION_ERO",
    OPTION_LQ_QUERY: "OPTION_LQ_QUERY",
    OPTION_CLIENT_DATA: "OPTION_CLIENT_DATA",
    OPTION_CLT_TIME: "OPTION_CLT_TIME",
    OPTION_LQ_RELAY_DATA: "OPTION_LQ_RELAY_DATA",
    OPTION_LQ_CLIENT_LINK: "OPTION_LQ_CLIENT_LINK",
    OPTION_NTP_SERVER: "OPTION_NTP_SERVER",
    OPTION_BOOTFILE_URL: "OPT_BOOTFILE_URL",
    OPTION_BOOTFILE_PARAM: "OPT_BOOTFILE_PARAM",
    OPTION_CLIENT_ARCH_TYPE: "OPTION_CLIENT_ARCH_TYPE",
    OPTION_NII: "OPTION_NII",
    OPTION_ERP_LOCAL_DOMAIN_NAME: "OPTION_ERP_LOCAL_DOMAIN_NAME",
    OPTION_RELAY_SUPPLIED_OPTIONS: "OPTION_RELAY_SUPPLIED_OPTIONS",
    OPTION_VSS: "OPTION_VSS",
    OPTION_CLIENT_LINKLAYER_ADDR: "OPTION_CLIENT_LINKLAYER_ADDR",
    OPTION_SOL_MAX_RT: "OPTION_SOL_MAX_RT",
    OPTION_INF_MAX_RT: "OPTION_INF_MAX_RT",
}

UNKNOWN_OPTION_NAME = "UnknownOption"
