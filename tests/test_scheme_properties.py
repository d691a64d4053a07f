from hypothesis import given
from hypothesis import strategies as st

from shamir_scheme import Builder, InvalidValueError, from_record, to_record

counts = st.integers(min_value=-5, max_value=300)
primes = st.one_of(st.integers(min_value=-5, max_value=400), st.integers(min_value=2**64, max_value=2**600))


def _holds(required, total, prime):
    return required >= 2 and required <= total and prime > total


@given(required=counts, total=counts, prime=primes)
def test_build_succeeds_iff_rules_hold(required, total, prime):
    builder = (
        Builder()
        .set_required_share_count(required)
        .set_total_share_count(total)
        .set_prime(prime)
    )
    try:
        scheme = builder.build()
    except InvalidValueError:
        assert not _holds(required, total, prime)
    else:
        assert _holds(required, total, prime)
        assert (scheme.required_share_count, scheme.total_share_count, scheme.prime) == (
            required,
            total,
            prime,
        )


@given(data=st.data())
def test_record_round_trip(data):
    required = data.draw(st.integers(min_value=2, max_value=255))
    total = data.draw(st.integers(min_value=required, max_value=255))
    prime = data.draw(st.integers(min_value=total + 1, max_value=2**15000))
    scheme = Builder().set_required_share_count(required).set_total_share_count(total).set_prime(prime).build()
    assert from_record(to_record(scheme)) == scheme
