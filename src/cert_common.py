# src/cert_common.py
import logging
from cryptography import x509
from pyasn1.codec.der import decoder
from pyasn1_modules import rfc5280

logger = logging.getLogger(__name__)


class CertDecoderError(Exception):
    """Base class for errors that carry a fixed, user-facing message."""


class UsageError(CertDecoderError):
    pass


class PathError(CertDecoderError):
    pass


def load_certificate(text: str) -> x509.Certificate:
    """Decode the first CERTIFICATE PEM block in `text` and parse it.

    Text around the block and any later blocks are ignored. Missing armor,
    bad base64 and bad DER all raise ValueError with the library's message.
    """
    cert = x509.load_pem_x509_certificate(text.encode())
    logger.debug("parsed certificate with serial %d", cert.serial_number)
    return cert

def render_tbs(cert: x509.Certificate) -> str:
    # open types so name attributes print as text rather than raw bytes
    tbs, rest = decoder.decode(cert.tbs_certificate_bytes, asn1Spec=rfc5280.TBSCertificate(),
                               decodeOpenTypes=True)
    if rest:
        logger.debug("ignoring %d trailing bytes after TBSCertificate", len(rest))
    return tbs.prettyPrint()
