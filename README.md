# icecore

Building blocks for an Interactive Connectivity Establishment (ICE) agent,
written in pure Python with no third-party dependencies.

## What it provides

- `icecore.candidate`: `CandidateType` with its recommended type preference
  values (`preference()`), `contains_candidate_type()`,
  `CandidateRelatedAddress` and `format_related_address()`.
- `icecore.states`: `ConnectionState` and `GatheringState`, with their
  printable names.
- `icecore.network`: `NetworkType` (`is_udp()`, `is_tcp()`,
  `network_short()`, `is_reliable()`, `is_ipv4()`, `is_ipv6()`),
  `supported_network_types()` and `determine_network_type()`, which maps a
  network name such as `"udp"` and an IP address to a concrete type.
- `icecore.role`: `Role`, with `Role.from_text()` and `to_text()`.
- `icecore.stun`: a small STUN `Message` with `add()`, `get()`,
  `contains()`, `encode()` and `Message.decode()`; `check_size()`,
  `add_message_integrity()`, `assert_inbound_username()` and
  `assert_inbound_message_integrity()`.
- `icecore.attributes`: `AttrControlled`, `AttrControlling`, `AttrControl`
  and `PriorityAttr`, each with `add_to()` and `get_from()`.
- `icecore.external_ip_mapper`: `new_external_ip_mapper()` turns `"ext"` or
  `"ext/local"` strings into an `ExternalIPMapper`; `validate_ip_string()`.
- `icecore.rand`: `CandidateIDGenerator`, `generate_crypto_random_string()`,
  `generate_ufrag()` and `generate_pwd()`.
- `icecore.mdns`: `MulticastDNSMode` and `generate_multicast_dns_name()`,
  which returns a version 4 UUID followed by `.local`.
- `icecore.stats`: the `CandidatePairStats` and `CandidateStats` records.
- `icecore.errors`: the exceptions, all subclasses of `IceError`.

## Installation

```
pip install icecore
```

## Examples

```python
from icecore.candidate import CandidateType
from icecore.external_ip_mapper import new_external_ip_mapper

mapper = new_external_ip_mapper(CandidateType.UNSPECIFIED, ["1.2.3.4/10.0.0.1"])
print(mapper.find_external_ip("10.0.0.1"))  # 1.2.3.4
```

```python
from icecore.attributes import PriorityAttr
from icecore.stun import Message

msg = Message()
PriorityAttr(12345).add_to(msg)
decoded = Message.decode(msg.encode())
print(PriorityAttr.get_from(decoded))  # PriorityAttr(priority=12345)
```

## What it does not do

This package holds the data types and codecs only. It has no agent: it does
not gather candidates, open sockets, run connectivity checks or speak to STUN
or TURN servers. It has no TCP multiplexing of ICE connections and no mDNS
server; `MulticastDNSMode` only names the modes.

## Running the tests

```
pip install -e ".[test]"
pytest
```