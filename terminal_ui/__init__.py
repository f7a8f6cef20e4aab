"""Terminal presentation layer for the blackjack table."""
