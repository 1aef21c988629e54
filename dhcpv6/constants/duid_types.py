# DHCP Unique Identifier types (RFC 8415, section 11; RFC 6355)

DUID_LLT = 1  # Link-layer address plus time
DUID_EN = 2  # Vendor-assigned unique ID based on Enterprise Number
DUID_LL = 3  # Link-layer address
DUID_UUID = 4  # Universally Unique Identifier

# A DUID can be no more than 128 octets long, not including the type code
DUID_MAX_LENGTH = 2 + 128


DUID_TYPE_NAMES = {
    DUID_LLT: "DUID-LLT",
    DUID_EN: "DUID-EN",
    DUID_LL: "DUID-LL",
    DUID_UUID: "DUID-UUID",
}
